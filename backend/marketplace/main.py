# marketplace/main.py
import datetime as dt
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from marketplace.config import Settings, settings as default_settings
from marketplace.core.db import init_db, close_db
from marketplace.core.bootstrap import ensure_template_catalog
from marketplace.core.errors import InternalError, MarketplaceError
from marketplace.core.sessions import SessionRegistry
from marketplace.services import CredentialStore, FavoriteLedger, TemplateCatalog
from marketplace.services.credentials import LOGIN_REQUIRED_MESSAGE, REGISTER_RULES_MESSAGE

from marketplace.api.routers import auth, templates, favorites

logger = logging.getLogger("uvicorn.error")


async def _marketplace_error_handler(request: Request, exc: MarketplaceError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

_BODY_RULES = {
    "/register": REGISTER_RULES_MESSAGE,
    "/login": LOGIN_REQUIRED_MESSAGE,
}

async def _request_validation_handler(request: Request, exc: RequestValidationError):
    # 422 from FastAPI becomes 400 with the usual envelope
    message = _BODY_RULES.get(request.url.path)
    if message is None:
        errors = exc.errors()
        message = errors[0].get("msg", "invalid request body") if errors else "invalid request body"
    return JSONResponse(status_code=400, content={"message": message})

async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("[error] %s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=InternalError.status_code, content={"message": InternalError.message})


def create_app(settings: Settings | None = None, sessions: SessionRegistry | None = None) -> FastAPI:
    """
    Build the API application.

    Stores are created here, once, and hung on ``app.state``; routes reach
    them only through the dependencies in ``marketplace.api.deps``.

    Args:
        settings: Configuration, defaults to the environment-derived settings
        sessions: Pre-built session registry (tests inject one with a fake clock)
    """
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME)

    app.state.settings = settings
    if sessions is None:
        sessions = SessionRegistry(ttl=dt.timedelta(minutes=settings.session_ttl_minutes))
    app.state.sessions = sessions
    app.state.credentials = CredentialStore()
    app.state.catalog = TemplateCatalog()
    app.state.favorites = FavoriteLedger(app.state.catalog)

    # Tokens travel in the Authorization header; no cookies
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MarketplaceError, _marketplace_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    @app.on_event("startup")
    async def on_startup():
        await init_db(settings.database_url, generate_schemas=settings.generate_schemas)
        await ensure_template_catalog(app.state.catalog)

    @app.on_event("shutdown")
    async def on_shutdown():
        await close_db()

    # Account routes sit at the root, resource routes under /api
    app.include_router(auth.router)
    app.include_router(templates.router, prefix="/api")
    app.include_router(favorites.router, prefix="/api")

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


app = create_app()
