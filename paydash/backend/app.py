from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from paydash.core.errors import TransactionDataError
from paydash.core.store import TransactionStore
from .config import settings
from .routers import health, transactions

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("paydash.backend")


def _load_store() -> TransactionStore:
    store = TransactionStore()
    try:
        store.load(settings.transactions_file)
    except TransactionDataError as exc:
        logger.error("Error loading transactions: %s", exc)
    return store


def create_app(store: Optional[TransactionStore] = None) -> FastAPI:
    """Build the API. Without an explicit store, transactions are loaded from the configured file on startup."""
    app = FastAPI(title=settings.title, version=settings.version)
    app.state.store = store if store is not None else TransactionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(transactions.router)
    app.include_router(health.router)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error = "Endpoint not found" if exc.status_code == 404 else exc.detail
        return JSONResponse(status_code=exc.status_code, content={"success": False, "error": error})

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})

    if store is None:

        @app.on_event("startup")
        def _on_startup() -> None:
            logger.info("Bootstrapping transaction dashboard backend")
            app.state.store = _load_store()

    return app


app = create_app()
