"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from circlewrap import __version__
from circlewrap.config import settings
from circlewrap.engine.errors import CircleRecordError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.circlewrap_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="circle-wrap",
        description="Convex wrapping outline around a cluster of circles",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CircleRecordError)
    async def _circle_record_error(request: Request, exc: CircleRecordError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": [{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors]},
        )

    from circlewrap.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
