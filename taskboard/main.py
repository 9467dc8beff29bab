# taskboard/main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.core.config import Settings, get_settings
from taskboard.core.errors import TaskboardError
from taskboard.core.logging_config import setup_logging
from taskboard.routers import auth, task
from taskboard.services.auth_service import AuthService
from taskboard.services.task_store import TaskStore
from taskboard.services.user_store import UserStore

# .env is read before Settings so plain os.environ users see it too
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "taskboard starting (auth_enabled=%s, port=%s)",
        app.state.settings.auth_enabled,
        app.state.settings.port,
    )
    yield
    app.state.task_store.clear()
    app.state.user_store.clear()
    logger.info("taskboard stopped, in-memory stores cleared")


def _format_validation_error(err: dict) -> str:
    loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TaskboardError)
    async def taskboard_error_handler(request: Request, exc: TaskboardError):
        return JSONResponse(
            status_code=exc.status_code, content=exc.to_body(), headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [_format_validation_error(e) for e in exc.errors()]
        return JSONResponse(status_code=400, content={"errors": errors})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # unknown routes and unsupported methods both read as "not found"
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    task_store: Optional[TaskStore] = None,
    user_store: Optional[UserStore] = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Taskboard API",
        version=os.getenv("APP_VERSION", "0.1.0"),
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.task_store = task_store if task_store is not None else TaskStore()
    app.state.user_store = user_store if user_store is not None else UserStore()
    app.state.auth_service = AuthService(app.state.user_store, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    app.include_router(task.router)
    if settings.auth_enabled:
        app.include_router(auth.auth_router)

    @app.get("/health")
    def health_app():
        return {"ok": True}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("API server listening on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
