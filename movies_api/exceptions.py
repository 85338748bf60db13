
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import logging

logger = logging.getLogger(__name__)

class MoviesApiException(Exception):
    """Base exception for the application"""
    pass

class MovieNotFoundException(MoviesApiException):
    def __init__(self, movie_id: str):
        super().__init__(f"Movie {movie_id} not found")
        self.movie_id = movie_id

class MovieConflictError(MoviesApiException):
    def __init__(self, movie_id: str):
        super().__init__(f"Movie {movie_id} already exists")
        self.movie_id = movie_id

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")

def field_errors(errors) -> list:
    """
    Flatten pydantic error dicts into [{"field", "issue"}] entries.
    """
    result = []
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        if err.get("type") == "json_invalid":
            # loc carries the byte offset of the parse failure
            loc = []
        loc = [str(part) for part in loc]
        result.append({
            "field": ".".join(loc) or "body",
            "issue": err.get("msg", "Invalid value"),
        })
    return result

async def movie_not_found_handler(request: Request, exc: MovieNotFoundException):
    logger.info("Movie not found", extra={"request_id": _request_id(request), "movie_id": exc.movie_id})
    return JSONResponse(status_code=404, content={"message": "Movie not found"})

async def movie_conflict_handler(request: Request, exc: MovieConflictError):
    logger.warning("Movie id conflict", extra={"request_id": _request_id(request), "movie_id": exc.movie_id})
    return JSONResponse(status_code=409, content={"message": str(exc)})

async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler. Returns 500 JSON and hides internal error details.
    """
    request_id = _request_id(request)

    logger.error(
        "Unhandled exception occurred",
        extra={"request_id": request_id, "path": request.url.path},
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred.",
            "request_id": request_id
        },
    )

async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Handle standard HTTPExceptions (e.g. 404 for unknown routes, 405).
    """
    request_id = _request_id(request)

    # Log 5xx errors as errors, 4xx as info
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})
    else:
        logger.info(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Body or parameters the framework could not parse (e.g. malformed JSON).
    Reported in the same shape as movie validation failures.
    """
    errors = field_errors(exc.errors())
    logger.info("Request validation error", extra={"request_id": _request_id(request), "errors": errors})

    return JSONResponse(status_code=400, content={"error": errors})
