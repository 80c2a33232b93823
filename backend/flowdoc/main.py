"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request

from flowdoc.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.flowdoc_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="FlowDoc",
        description="Flowchart image → structured flow documentation via a vision reasoning service",
        version="0.1.0",
    )

    # Open allow-origin on every response. Preflights are answered by the
    # routes themselves so their bodies stay empty.
    @app.middleware("http")
    async def allow_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Origin", settings.cors_allow_origin)
        return response

    from flowdoc.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
