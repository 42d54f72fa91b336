"""FastAPI application factory, error mapping, and dashboard."""

import sys
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from actionscribe.adapters.llm import create_provider
from actionscribe.adapters.storage.sql_store import SqlActionStore
from actionscribe.adapters.web.dashboard import DASHBOARD_HTML
from actionscribe.adapters.web.routes import actions_router
from actionscribe.config import AppConfig
from actionscribe.domain.errors import ActionScribeError, ProviderFailure, Unauthorized
from actionscribe.ports.outbound import ActionStorePort, LLMPort
from actionscribe.services.extraction import ActionExtractionService


def _log(msg: str):
    print(msg, file=sys.stderr)


def _bootstrap(config: AppConfig, store: ActionStorePort) -> None:
    """Create tables and, if enabled, a user row for every session email."""
    init_db = getattr(store, "init_db", None)
    if init_db is not None:
        init_db()
    ensure_user = getattr(store, "ensure_user", None)
    if config.auth.auto_provision_users and ensure_user is not None:
        for email in sorted(set(config.auth.session_tokens.values())):
            ensure_user(email)


def create_app(
    config: Optional[AppConfig] = None,
    store: Optional[ActionStorePort] = None,
    provider: Optional[LLMPort] = None,
) -> FastAPI:
    """Wire config, store and provider explicitly into a FastAPI app."""
    config = config or AppConfig.from_env()
    store = store or SqlActionStore(config.storage.database_url)
    provider = provider or create_provider(config.provider)

    app = FastAPI(title="ActionScribe")
    app.state.config = config
    app.state.store = store
    app.state.provider = provider
    app.state.extractor = ActionExtractionService(provider, temperature=config.provider.temperature)
    app.include_router(actions_router)

    @app.exception_handler(ActionScribeError)
    async def handle_actionscribe_error(request: Request, exc: ActionScribeError):
        if isinstance(exc, ProviderFailure):
            # Details stay in the server log
            _log(f"[{datetime.now().isoformat()}] {request.url.path}: provider failure: {exc}")
            return JSONResponse(status_code=500, content={"detail": "Failed to process text"})
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
        return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)}, headers=headers)

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "provider": config.provider.name,
            "provider_configured": provider.is_configured,
        }

    @app.get("/", response_class=HTMLResponse)
    async def root():
        """Web dashboard"""
        return DASHBOARD_HTML

    _bootstrap(config, store)
    if not provider.is_configured:
        _log(f"Provider {config.provider.name!r} is not configured; extraction will fail")
    print(f"ActionScribe ready (provider={config.provider.name}, db={config.storage.database_url})")
    return app
