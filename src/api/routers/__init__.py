"""API routers."""

try:
    from api.routers import detection
except ImportError:
    from src.api.routers import detection

__all__ = ["detection"]
