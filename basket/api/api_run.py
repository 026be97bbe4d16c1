from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from basket.api.dependencies import get_compressor, get_repository
from basket.api.routes import lists, share
from basket.utilities.exceptions import ListStoreError

# Logging
logger = logging.getLogger("basket_app")


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Seed the default catalog and probe compression once at startup."""
    try:
        get_repository().seed_defaults()
    except ListStoreError as e:
        logger.error("Failed to seed default catalog: %s", e)
    compressor = get_compressor()
    logger.info("Share compression %s", "enabled" if compressor.available else "disabled")
    yield


# Initialize FastAPI app
app = FastAPI(title="Basket Shopping List API", lifespan=lifespan)

# Include routers
app.include_router(lists.router)
app.include_router(share.router)


@app.exception_handler(ListStoreError)
async def list_store_error_handler(request: Request, exc: ListStoreError):
    logger.error("List store failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"error": "List store unavailable"})


@app.get("/api/health")
def health():
    return {"status": "ok", "compression": get_compressor().available}
