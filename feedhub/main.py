"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from feedhub.api import auth, feeds
from feedhub.config import get_settings
from feedhub.exceptions import DuplicateEmailError
from feedhub.schemas.errors import ErrorResponse
from feedhub.validation import field_errors

settings = get_settings()

REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(f"Starting FeedHub ({settings.environment})")
    yield


app = FastAPI(
    title="FeedHub API",
    description="RSS feed provider management",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def error_response(
    status_code: int,
    message: str,
    errors: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render the `{message, errors}` body every failed request returns."""
    body = ErrorResponse(message=message, errors=errors).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def strip_request_location(errors: list[dict]) -> list[dict]:
    """Drop the leading `body`/`query`/... part of FastAPI error locations."""
    stripped = []
    for error in errors:
        loc = tuple(error["loc"])
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        stripped.append({**error, "loc": loc})
    return stripped


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = field_errors(strip_request_location(exc.errors()), data=exc.body)
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation failed.", errors)


@app.exception_handler(DuplicateEmailError)
async def duplicate_email_handler(request: Request, exc: DuplicateEmailError):
    return error_response(status.HTTP_409_CONFLICT, exc.message, {"email": exc.message})


# Register routers
app.include_router(auth.router)
app.include_router(feeds.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
