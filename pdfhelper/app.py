"""
Application factory - builds FastAPI app with all middleware and routes.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pdfhelper import __version__
from pdfhelper.config import Settings, get_settings
from pdfhelper.modules.health.router import router as health_router
from pdfhelper.modules.render.router import router as render_router
from pdfhelper.shared.errors import PdfHelperError
from pdfhelper.shared.ids import generate_request_id
from pdfhelper.shared.logging import (
    clear_request_context,
    get_logger,
    set_request_context,
    setup_logging,
)
from pdfhelper.shared.types import RequestContext

logger = get_logger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()

    setup_logging(settings.log_level)
    logger.info(f"Starting PdfHelper ({settings.environment})...")

    yield

    logger.info("PdfHelper stopped")


def build_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Optional settings override (useful for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="PdfHelper",
        description="HTML to PDF composition service",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request context middleware
    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next: Any) -> Response:
        """Attach request context for logging and set security headers."""
        ctx = RequestContext(
            request_id=request.headers.get("X-Request-ID", generate_request_id()),
        )
        set_request_context(ctx)

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = ctx.request_id
            for name, value in SECURITY_HEADERS.items():
                response.headers.setdefault(name, value)
            return response
        finally:
            clear_request_context()

    @app.exception_handler(PdfHelperError)
    async def pdfhelper_error_handler(request: Request, exc: PdfHelperError) -> JSONResponse:
        """Handle PdfHelperError with the uniform {"message"} failure body."""
        logger.warning(f"Request failed: {exc.to_dict()}")
        return JSONResponse(status_code=exc.http_status, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed requests fail like every other request failure."""
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=403, content={"message": message})

    # Register routers
    app.include_router(health_router, tags=["health"])
    app.include_router(render_router)

    # Root endpoint
    @app.get("/")
    async def root() -> dict[str, str]:
        return {"service": "PdfHelper", "version": __version__}

    return app
