"""FastAPI application factory and configuration."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import register_error_handlers, register_routes
from .core import ALLOWED_CORS_ORIGINS, LOG_LEVEL, SCHEMA_WARMUP
from .dependencies import get_schema_initializer

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _warm_schema() -> None:
    try:
        await get_schema_initializer().ensure_schema_id()
    except Exception:
        logger.exception("Schema warmup failed; will retry on first request")


@asynccontextmanager
async def lifespan(app: FastAPI):
    warmup = asyncio.create_task(_warm_schema()) if SCHEMA_WARMUP else None
    yield
    if warmup is not None and not warmup.done():
        warmup.cancel()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Streamboard API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("streamboard.app:app", host="127.0.0.1", port=3000, reload=True)
