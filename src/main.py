import logging
import os
import sys
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api import api_router
from .config import get_settings
from .core.exceptions import ConfigurationError, HindiReaderError


def apply_logging_preferences(settings):
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(message)s"
)

apply_logging_preferences(settings)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(ensure_ascii=False) if settings.log_format == "json" else structlog.dev.ConsoleRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


def check_required_settings(settings) -> None:
    missing = settings.missing_required()
    if missing:
        raise ConfigurationError(missing)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    apply_logging_preferences(settings)
    try:
        check_required_settings(settings)
    except ConfigurationError as e:
        logger.error("Refusing to start", missing=e.missing)
        raise
    logger.info("Starting Hindi Reader API", version="0.1.0", port=settings.port)

    yield

    logger.info("Shutting down Hindi Reader API")


def create_application() -> FastAPI:
    app = FastAPI(
        title="Hindi Reader",
        description="Hindi news reading aid: news search, Hindi/Hebrew summaries, Hindi speech and word-by-word glosses",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HindiReaderError)
    async def hindi_reader_exception_handler(request: Request, exc: HindiReaderError):
        if exc.status_code >= 500:
            logger.warning(
                "Request failed",
                path=request.url.path,
                error=exc.message,
                error_code=exc.error_code,
            )
        return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        logger.error(
            "Unhandled exception occurred",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "details": str(exc),
            }
        )

    app.include_router(api_router, prefix="/api")

    # Static frontend, when one is deployed next to the API
    if os.path.isdir(settings.public_dir):
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")

    return app


app = create_application()


def run() -> None:
    import uvicorn

    missing = settings.missing_required()
    if missing:
        logger.error("Missing env vars: " + ", ".join(missing), missing=missing)
        sys.exit(1)

    uvicorn.run(
        "src.main:app",
        host=settings.api_host,
        port=settings.port,
        reload=settings.debug,
        log_level="info",
        access_log=False,
    )


if __name__ == "__main__":
    run()
