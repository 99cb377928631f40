"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import idgen
from config import load_config
from core.errors import IdOverflowError, InvalidLengthError, RandomSourceError
from core.health import HealthChecker, create_random_source_check, create_sortable_check
from internal.logging import get_logger, LogLevel, StructuredLogger
from utils.crash import create_async_handler
from ui.routes import ids, health


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()
    
    # Configure structured logging
    log_level = LogLevel[config.logging.level.upper()]
    StructuredLogger.configure(min_level=log_level)
    logger_instance = get_logger()

    # Create core components
    sortable_generator = idgen.configure(config.ids)
    random_generator = sortable_generator.random_generator
    health_checker = HealthChecker()
    health_checker.register("random_source", create_random_source_check(random_generator), critical=True)
    health_checker.register("sortable_generator", create_sortable_check(sortable_generator), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger_instance.info("Application starting", version="1.0.0")
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        logger_instance.info("Application started successfully")
        
        yield
        
        # Shutdown
        logger_instance.info("Application shutdown complete", **sortable_generator.stats())

    app = FastAPI(
        title="Sortable ID Service",
        version="1.0.0",
        description="random and time-sortable base62 identifiers",
        lifespan=lifespan,
    )

    @app.exception_handler(InvalidLengthError)
    async def invalid_length(request: Request, exc: InvalidLengthError):
        return JSONResponse(status_code=422, content={"detail": exc.args[0], **exc.context})

    @app.exception_handler(IdOverflowError)
    async def overflow(request: Request, exc: IdOverflowError):
        return JSONResponse(status_code=503, content={"detail": exc.args[0], **exc.context})

    @app.exception_handler(RandomSourceError)
    async def random_source_failed(request: Request, exc: RandomSourceError):
        return JSONResponse(status_code=503, content={"detail": exc.args[0], **exc.context})

    # Initialize route modules with dependencies
    ids.init(random_generator, sortable_generator, config.ids.default_length)
    health.init(sortable_generator, health_checker)

    # Include routers
    app.include_router(ids.router)
    app.include_router(health.router)

    return app
