import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formfields.config import settings
from formfields.exception_handlers import register_exception_handlers
from formfields.middleware.language import LanguageMiddleware
from formfields.middleware.logging import StructuredLoggingMiddleware, configure_logging
from formfields.routes import fields

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Normalization, validation and export of form field values",
        debug=settings.debug,
        version=settings.app_version,
    )

    # Starlette runs middleware last-added first
    app.add_middleware(LanguageMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(fields.router, prefix="/api/v1")

    @app.get("/health", tags=["Root"])
    async def health():
        return {"status": "ok", "version": settings.app_version}

    logger.info(f"{settings.app_name} started in {settings.environment} mode")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
