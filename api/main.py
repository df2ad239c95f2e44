from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import settings
from core.db import Database
from core.log import configure_logging
from pizzas import repository as pizza_repository
from pizzas import router as pizzas_router

logger = logging.getLogger(__name__)


def create_app(*, database: Database | None = None) -> FastAPI:
    """
    Build the API. When `database` is given it is used as is and not closed
    on shutdown; otherwise a pool is opened from the environment.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            app.state.db = database
            yield
            return

        # One pool per process, shared by every request.
        db = await Database.connect()
        try:
            await pizza_repository.ensure_table(db)
            app.state.db = db
            logger.info("database_ready")
            yield
        finally:
            await db.close()

    app = FastAPI(title="pizza-api", lifespan=lifespan)
    app.include_router(pizzas_router.router, tags=["pizzas"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    configure_logging()
    uvicorn.run(
        app,
        host=settings.api_host(),
        port=settings.api_port(),
        log_level=settings.log_level().lower(),
    )


if __name__ == "__main__":
    run()
