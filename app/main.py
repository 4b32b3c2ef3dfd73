from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from starlette.staticfiles import StaticFiles

from app.core.config import settings
from app.routers import health, pages, sessions
from app.routers import search as search_router
from app.services.store import InMemoryProductStore

logger = logging.getLogger("search-params")
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s: %(message)s",
)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    store: InMemoryProductStore = app.state.store
    if not len(store):
        store.seed_random(settings.seed_count, seed=settings.seed_random)
    logger.info("[startup] Serving %d products", len(store))

    yield


def create_app(store: Optional[InMemoryProductStore] = None) -> FastAPI:
    app = FastAPI(
        title="Query Params Search Demo",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else InMemoryProductStore()

    app.include_router(health.router)
    app.include_router(search_router.router)
    app.include_router(sessions.router)
    app.include_router(pages.router)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=True)
