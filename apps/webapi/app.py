# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from skincdn.store import ResolverStore

from . import __version__
from .api import router as api_router


def normalize_root_path(root_path: str) -> str:
    rp = (root_path or "").strip()
    if not rp:
        return ""
    if not rp.startswith("/"):
        rp = "/" + rp
    return rp.rstrip("/")


def create_app(
    store: ResolverStore,
    *,
    root_path: str = "",
    cors_allow_origins: Optional[Sequence[str]] = None,
    gzip_minimum_size: int = 800,
) -> FastAPI:
    """FastAPI app factory."""

    app = FastAPI(
        title="skincdn API",
        version=__version__,
        root_path=normalize_root_path(root_path),
        docs_url="/docs",
        redoc_url=None,
    )

    app.state.store = store

    if gzip_minimum_size and gzip_minimum_size > 0:
        app.add_middleware(GZipMiddleware, minimum_size=int(gzip_minimum_size))

    if cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cors_allow_origins),
            allow_credentials=False,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    app.include_router(api_router)

    @app.get("/healthz")
    def healthz():
        return {"ok": True, "ready": store.ready}

    return app
