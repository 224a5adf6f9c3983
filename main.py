from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routers import songs
from config import Settings, settings as default_settings
from domain.errors import CatalogError
from infra.database import connection as db_connection
from utils.external_metadata import MusicInfoClient
from utils.logger import get_logger, set_log_level

logger = get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or default_settings
    set_log_level(app_settings.LOG_LEVEL)
    engine = db_connection.init_engine(app_settings)

    # Lifespan event to handle startup/shutdown
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_connection.init_db(engine)
        logger.info(f"Music API endpoint: {app_settings.MUSIC_API_URL}")
        yield
        db_connection.close_db(engine)

    app = FastAPI(
        title="Music Library API",
        description="A RESTful API for managing a music library with external API integration",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.music_info_client = MusicInfoClient(app_settings.MUSIC_API_URL)

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    # 未定義ルート (404) やメソッド不一致 (405) も {"error": ...} で返す
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    # Root endpoint for health check
    @app.get("/")
    async def root():
        return {"status": "ok", "message": "Music Library API is running"}

    app.include_router(songs.router)
    return app


app = create_app()
