"""Main FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from roomvideo import __version__
from roomvideo.config import Settings, get_settings
from roomvideo.core.cors import StreamAwareCORSMiddleware
from roomvideo.core.exceptions import AuthenticationError, RoomVideoError
from roomvideo.database import Base, create_db_engine, create_session_factory
from roomvideo.api import auth, videos, rooms, users
from roomvideo.seed import seed_defaults
import roomvideo.models  # noqa: F401  (register tables on Base.metadata)
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.app_name}...")
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    if settings.seed_defaults:
        db = app.state.session_factory()
        try:
            seed_defaults(db)
        finally:
            db.close()

    yield  # Application is running

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}...")
    app.state.engine.dispose()


async def service_error_handler(request: Request, exc: RoomVideoError):
    """Render service errors as JSON with their mapped status."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are plain 400s."""
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit settings object and store."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    engine = create_db_engine(settings.database_url)
    # Create database tables
    Base.metadata.create_all(bind=engine)

    app = FastAPI(
        title=settings.app_name,
        description="Room-tagged video upload and playback with role-based administration",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # CORS middleware
    app.add_middleware(
        StreamAwareCORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
        allow_headers=["*"],
        expose_headers=["Content-Length", "Content-Range", "Accept-Ranges", "Content-Type"],
    )

    app.add_exception_handler(RoomVideoError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(videos.router, prefix="/api/videos", tags=["Videos"])
    app.include_router(rooms.router, prefix="/api/rooms", tags=["Rooms"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"{settings.app_name} API",
            "version": __version__,
            "docs": "/api/docs"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


def run() -> None:
    """Serve the application with uvicorn, over TLS when certificates exist."""
    import uvicorn

    settings = get_settings()
    ssl_options = {}
    if Path(settings.ssl_certfile).is_file() and Path(settings.ssl_keyfile).is_file():
        logger.info("HTTPS certificates found, starting HTTPS server")
        ssl_options = {"ssl_certfile": settings.ssl_certfile, "ssl_keyfile": settings.ssl_keyfile}

    uvicorn.run(
        "roomvideo.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        **ssl_options,
    )


if __name__ == "__main__":
    run()
