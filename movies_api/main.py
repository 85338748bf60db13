"""
=============================================================================
MOVIES API - In-memory movie catalogue
=============================================================================
Features:
  - CRUD over /movies with genre filtering
  - Strict body validation reporting every field error at once
  - Origin allow-list enforced before any handler runs
  - JSON logging with per-request correlation ids
=============================================================================
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .dependencies import close_resources, get_movie_store, init_resources, state
from .exceptions import (
    MovieConflictError,
    MovieNotFoundException,
    global_exception_handler,
    http_exception_handler,
    movie_conflict_handler,
    movie_not_found_handler,
    validation_exception_handler,
)
from .logging_config import setup_logging
from .middleware import OriginGateMiddleware, RequestTrackingMiddleware
from .repositories.movie_store import MovieStore
from .routers import movie_router
from .schemas.movie import HealthResponse

logger = logging.getLogger(__name__)


# =============================================================================
# STARTUP & SHUTDOWN
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_resources()
    logger.info(f"Movie store ready with {len(state.movie_store)} movies")
    yield
    close_resources()
    logger.info("Movie store cleared")


# =============================================================================
# FASTAPI APP
# =============================================================================
app = FastAPI(
    title="Movies API",
    description="REST API over an in-memory movie catalogue",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware added last runs first: request id, then origin gate, then CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["*"],
)
app.add_middleware(OriginGateMiddleware, allowed_origins=settings.ALLOWED_ORIGINS)
app.add_middleware(RequestTrackingMiddleware)

app.add_exception_handler(MovieNotFoundException, movie_not_found_handler)
app.add_exception_handler(MovieConflictError, movie_conflict_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(movie_router.router)


@app.get("/health", response_model=HealthResponse)
async def health_check(store: MovieStore = Depends(get_movie_store)):
    """Health check endpoint"""
    return {"status": "healthy", "movies": len(store)}


# =============================================================================
# MAIN
# =============================================================================
def run():
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        server_header=False,
        log_config=None,
    )


if __name__ == "__main__":
    run()
