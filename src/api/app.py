import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import detection
from config import settings
from services.product_detection import ENABLE_DEEP_EXTRACTION

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    if ENABLE_DEEP_EXTRACTION and settings.llm_api_key:
        logger.info(f"Deep extraction enabled with model {settings.llm_model} at {settings.llm_api_base}")
    else:
        logger.info("Deep extraction disabled, using pattern-only detection")
    yield

app = FastAPI(
    title=settings.app_name,
    description="Detect and score product mentions in HTML articles",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(detection.router, prefix="/api/v1/detection", tags=["detection"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
