"""
Main FastAPI application entry point.
"""
from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.quizzes import router as quizzes_router
from .core.config import Settings, get_settings
from .core.errors import CatalogLoadError
from .services.catalog import load_catalog
from .services.quiz_service import UNEXPECTED_ERROR, QuizService
from .services.shuffle import Shuffler

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_quiz_service(settings: Settings) -> QuizService:
    """Load the question catalog and wire up a fresh quiz service."""
    catalog = load_catalog(settings.QUESTIONS_FILE)
    return QuizService(
        catalog,
        shuffler=Shuffler.seeded(settings.SHUFFLE_SEED),
        random_quiz_size=settings.RANDOM_QUIZ_SIZE,
    )


def create_app(settings: Optional[Settings] = None, service: Optional[QuizService] = None) -> FastAPI:
    """Build the API application.

    When ``service`` is given it is used as-is; otherwise the catalog is
    loaded during startup and a failure to load it aborts the process.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME}...")
        if service is None:
            try:
                app.state.quiz_service = build_quiz_service(settings)
            except CatalogLoadError as e:
                logger.critical(f"Failed to load questions: {e}")
                raise
        logger.info("Quiz service ready")

        yield

        logger.info(f"Shutting down {settings.APP_NAME}...")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        docs_url=None if settings.is_production() else "/docs",
        redoc_url=None if settings.is_production() else "/redoc",
        lifespan=lifespan,
    )
    if service is not None:
        app.state.quiz_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies."""
        logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Invalid request format."}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": UNEXPECTED_ERROR}
        )

    @app.get("/health", tags=["Health"])
    def health_check():
        """Basic health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT
        }

    app.include_router(quizzes_router, tags=["quizzes"])
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    run()
