"""Shared fixtures for detection and API tests."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, List, Optional
import sys
from pathlib import Path
import os

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

os.environ.setdefault("ENABLE_DEEP_EXTRACTION", "true")
os.environ.setdefault("LLM_API_KEY", "")

try:
    from api.routers import detection
except ImportError:
    from src.api.routers import detection

from services.product_detection import (
    ExternalExtraction,
    MarketplaceAuthError,
    MarketplaceLookupError,
    ProductRecord,
)


class StubLookup:
    """Marketplace lookup returning fixed records, keyed by identifier and by query."""

    def __init__(
        self,
        by_identifier: Optional[Dict[str, object]] = None,
        by_query: Optional[Dict[str, object]] = None,
    ):
        self.by_identifier = by_identifier or {}
        self.by_query = by_query or {}
        self.calls: List[tuple] = []

    async def lookup_by_identifier(self, identifier: str) -> Optional[ProductRecord]:
        self.calls.append(("identifier", identifier))
        return self._answer(self.by_identifier.get(identifier))

    async def search(self, query: str) -> Optional[ProductRecord]:
        self.calls.append(("search", query))
        return self._answer(self.by_query.get(query))

    @staticmethod
    def _answer(value):
        if isinstance(value, Exception):
            raise value
        return value


class StubDeepExtractor:
    def __init__(self, result: Optional[ExternalExtraction] = None, error: Optional[Exception] = None):
        self.result = result or ExternalExtraction()
        self.error = error
        self.calls: List[tuple] = []

    async def extract(self, title: str, numbered_paragraphs: str, pre_detected_summary: str) -> ExternalExtraction:
        self.calls.append((title, numbered_paragraphs, pre_detected_summary))
        if self.error:
            raise self.error
        return self.result


async def no_sleep(seconds: float) -> None:
    return None


WIDGET_ARTICLE = """
<h2><a href="https://www.amazon.com/dp/WIDGET123">Widget Pro 3000</a></h2>
<p>We spent a month with the <strong>Widget Pro 3000</strong> on our desk.</p>
<p>At $49.99 the <strong>Widget Pro 3000</strong> earns 4.5/5 stars from us.</p>
<p>Setup is quick and the <strong>Widget Pro 3000</strong> stays quiet under load.</p>
"""

PLAIN_ARTICLE = """
<p>getting enough sleep helps recovery and focus.</p>
<p>most adults need seven to nine hours every night.</p>
<p>a dark, cool room makes falling asleep easier.</p>
"""


@pytest.fixture
def widget_article() -> str:
    return WIDGET_ARTICLE


@pytest.fixture
def plain_article() -> str:
    return PLAIN_ARTICLE


@pytest.fixture
def record_factory():
    def make(identifier: str, title: str = "", **kwargs) -> ProductRecord:
        return ProductRecord(identifier=identifier, title=title or f"Product {identifier}", **kwargs)

    return make


@pytest.fixture
def auth_error() -> MarketplaceAuthError:
    return MarketplaceAuthError("401 Invalid API key")


@pytest.fixture
def lookup_miss() -> MarketplaceLookupError:
    return MarketplaceLookupError("not found")


@pytest.fixture(scope="function")
def test_app():
    @asynccontextmanager
    async def test_lifespan(app: FastAPI) -> AsyncGenerator:
        yield

    app = FastAPI(
        title="ProductLens Test",
        description="Detect and score product mentions in HTML articles",
        version="0.1.0",
        lifespan=test_lifespan,
    )

    app.include_router(detection.router, prefix="/api/v1/detection", tags=["detection"])

    @app.get("/")
    async def root():
        return {
            "name": "ProductLens",
            "version": "0.1.0",
            "status": "running",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


@pytest.fixture(scope="function")
def client(test_app: FastAPI):
    test_app.dependency_overrides[detection.get_deep_extractor] = lambda: None
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()
