"""
Dependencies for pizza routes.
"""

from __future__ import annotations

from fastapi import Request

from core.db import Database


def get_database(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not initialized. It is created in the app lifespan.")
    return db
