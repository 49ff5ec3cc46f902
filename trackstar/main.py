import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from trackstar.auth import HeaderSessionResolver, SessionResolver
from trackstar.config import (
    API_DESCRIPTION,
    API_TITLE,
    API_VERSION,
    CORS_ORIGINS,
    GENERATE_DOCS_ON_STARTUP,
    HOST,
    LOG_LEVEL,
    OPENAPI_OUTPUT_FILE,
    PORT,
)
from trackstar.database import init_db
from trackstar.docs import write_openapi
from trackstar.errors import ApiError, InternalError
from trackstar.routes import api_router
from trackstar.services.store import HabitStore

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "header")]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else err.get("msg", "Invalid input"))
    return "Validation error: " + "; ".join(parts) if parts else "Validation error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(400, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Store failure on %s %s", request.method, request.url.path)
        return _error(InternalError.status_code, InternalError.default_message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(InternalError.status_code, InternalError.default_message)


def create_app(session_resolver: SessionResolver | None = None, store_factory=HabitStore,
               init_database: bool = True, generate_docs: bool = GENERATE_DOCS_ON_STARTUP) -> FastAPI:
    """
    Build the API. Collaborators are passed in here and kept on app.state:
    `session_resolver` turns requests into identities, `store_factory` wraps a
    database session into the store the statistics engine reads from.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if init_database:
            init_db()
        if generate_docs:
            write_openapi(app, OPENAPI_OUTPUT_FILE)
        logger.info("%s %s started", API_TITLE, API_VERSION)
        yield

    app = FastAPI(
        lifespan=lifespan,
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        docs_url="/api-docs",
        redoc_url=None,
        openapi_url="/api-docs/openapi.json",
    )
    app.state.session_resolver = session_resolver or HeaderSessionResolver()
    app.state.store_factory = store_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms) [%s]",
            request.method, request.url.path, response.status_code, elapsed_ms, request_id,
        )
        response.headers["X-Request-ID"] = request_id
        return response

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run("trackstar.main:app", host=HOST, port=PORT, reload=False)


if __name__ == "__main__":
    run()
