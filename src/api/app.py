import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from config import ApplicationConfig
from src.api.error import ClientError, client_error_handler, validation_error_handler
from src.api.routes import accounts, categories, eligibility, listings, subscriptions
from src.depends import StorageBackend, create_backend

logger = logging.getLogger(__name__)


def create_app(config=ApplicationConfig, backend: Optional[StorageBackend] = None) -> FastAPI:
    backend = backend or create_backend(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await backend.init()
        logger.info(f"Storage backend {type(backend).__name__} ready")
        yield
        await backend.dispose()

    app = FastAPI(title="Marketplace Access Service", lifespan=lifespan)
    app.state.backend = backend

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        elapsed_ms = int((time.time() - start_time) * 1000)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms}ms)")
        return response

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    for module in (accounts, subscriptions, eligibility, listings, categories):
        app.include_router(module.router, prefix=config.API_PREFIX)

    return app
