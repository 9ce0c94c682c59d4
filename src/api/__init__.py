"""HTTP surface for product detection: the FastAPI app and its routers."""
