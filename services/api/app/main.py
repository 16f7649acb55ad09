"""Ordermap service entrypoint."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.api.app.db.database import get_sessionmaker
from services.api.app.db.init_db import init_db
from services.api.app.routers.order import router as order_router
from services.api.app.routers.pages import router as pages_router
from services.api.app.services.store import OrderStore
from services.api.app.utils.logger import get_logger

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    app.state.store = OrderStore(get_sessionmaker())
    logger.info("order store ready")
    yield


app = FastAPI(title="Ordermap", lifespan=lifespan)

app.include_router(pages_router)
app.include_router(order_router)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.exception_handler(StarletteHTTPException)
async def _plain_text_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    del request
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    host = os.getenv("ORDERMAP_HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info("server listening on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
