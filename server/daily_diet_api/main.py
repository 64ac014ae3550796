"""Daily Diet API - FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .database import db_manager
from .routes import meals

settings = get_settings()

# Parent of every module logger in this package.
PACKAGE_LOGGER = __name__.rsplit(".", 1)[0]
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> logging.Logger:
    """Attach a stream handler to the package logger; repeat calls only set the level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    db_manager.create_schema()
    yield


app = FastAPI(
    title="Daily Diet API",
    description="Track meals and diet adherence per anonymous session",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS for frontend; the session travels as a cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Include routers
app.include_router(meals.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "daily-diet-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.daily_diet_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level,
        reload=True,
    )
