# COMPONENT: FASTAPI APPLICATION ENTRY POINT
# REQUIREMENTS SATISFIED:
#   - API initialization and routing
#   - Middleware configuration (logging + CORS)
#   - Store ownership and error mapping
#   - AWS Lambda compatibility via Mangum
"""
task_api/main.py

Application entry point for the task API. This module assembles the FastAPI
application around a single in-memory TaskStore, registers middleware and
error handlers, mounts the /tasks router and exposes the AWS Lambda handler.

Execution Order:
    1. Environment variables are loaded from .env
    2. Logging and settings are read from the environment
    3. FastAPI app is created with Swagger UI at /api-docs
    4. The TaskStore is created and attached to app.state
    5. Request/response logging middleware and CORS middleware are attached
    6. Store errors are mapped to JSON responses
    7. Routers are mounted
    8. The Mangum handler is created for AWS Lambda deployment

Key Design Decisions:
    - create_app() builds a fresh app and store on every call. The module
      level `app` is the one served by uvicorn and Lambda; tests build their
      own so each starts from an empty store with nextId = 1.
    - Handlers reach the store through a dependency (see
      api/routers/tasks.py) instead of a module global.
"""
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware
from mangum import Mangum

from .api.middleware.log_requests import DeepASGILogger
from .api.routers.tasks import router as tasks_router
from .config import Settings, get_settings
from .errors import InvalidInput, NotFound, TaskStoreError
from .repositories.tasks_repo import TaskStore
from .utils.logging import get_logger, setup_logger

API_TITLE = "API Task"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API para gerenciar um mapa de dados (chave-valor)."
DOCS_URL = "/api-docs"

logger = get_logger()


async def handle_store_error(request: Request, exc: TaskStoreError) -> JSONResponse:
    logger.info("%s %s failed: %s (%s)", request.method, request.url.path, type(exc).__name__, exc.message)
    if isinstance(exc, NotFound):
        logger.debug("Unknown task id: %s", exc.task_id)
    elif isinstance(exc, InvalidInput):
        logger.debug("Validation details: %s", exc.details)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def create_app(store: Optional[TaskStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    setup_logger()
    settings = settings or get_settings()

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        servers=[{"url": settings.public_url, "description": "Servidor local"}],
        docs_url=DOCS_URL,
        redoc_url=None,
        openapi_url=f"{DOCS_URL}/openapi.json",
    )
    app.state.store = store if store is not None else TaskStore()
    app.state.settings = settings

    if settings.request_logging:
        app.add_middleware(DeepASGILogger)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskStoreError, handle_store_error)

    app.include_router(tasks_router)

    @app.get("/health", include_in_schema=False)
    def health():
        return {"status": "ok"}

    return app


app = create_app()

handler = Mangum(app)
