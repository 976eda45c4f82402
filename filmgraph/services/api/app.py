from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filmgraph.common.settings import Settings, get_settings
from filmgraph.services.api.errors import install_error_handlers
from filmgraph.services.api.routers import films, users
from filmgraph.services.core import Filmgraph, build_core


def create_app(core: Optional[Filmgraph] = None, settings: Optional[Settings] = None) -> FastAPI:
    cfg = settings or (core.settings if core is not None else get_settings())
    dev = cfg.app_env.lower() == "development"

    app = FastAPI(
        title="Filmgraph API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )
    app.state.core = core or build_core(cfg)

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    install_error_handlers(app)

    # Routers
    app.include_router(films.router, prefix=cfg.api.prefix)
    app.include_router(users.router, prefix=cfg.api.prefix)
    return app
