"""
Pizza persistence (raw SQL).

The CRUD functions return None on any failure (row not found, driver or
connection error, constraint violation). Callers do not learn the cause;
it is logged here.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core.db import Database

logger = logging.getLogger(__name__)

# Driver, server, and socket failures all count as "no result".
_DB_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, TimeoutError)


async def ensure_table(db: Database) -> None:
    await db.execute(
        """
        CREATE TABLE IF NOT EXISTS pizzas (
            uuid text PRIMARY KEY,
            pizza_name text NOT NULL,
            created_at timestamptz NOT NULL DEFAULT now(),
            updated_at timestamptz NOT NULL DEFAULT now()
        )
        """
    )


async def _fetch_one(db: Database, op: str, sql: str, *args: Any) -> dict | None:
    try:
        return await db.fetch_one(sql, *args)
    except _DB_ERRORS:
        logger.exception("pizza_%s_failed args=%s", op, args)
        return None


async def list_pizzas(db: Database) -> list[dict] | None:
    """
    Return all pizzas, oldest first. An empty table gives [], a failure None.
    """
    try:
        return await db.fetch_all(
            """
            SELECT uuid, pizza_name
            FROM pizzas
            ORDER BY created_at ASC, uuid ASC
            """
        )
    except _DB_ERRORS:
        logger.exception("pizza_list_failed")
        return None


async def insert_pizza(db: Database, *, uuid: str, pizza_name: str) -> dict | None:
    return await _fetch_one(
        db,
        "insert",
        """
        INSERT INTO pizzas (uuid, pizza_name)
        VALUES ($1, $2)
        RETURNING uuid, pizza_name
        """,
        uuid,
        pizza_name,
    )


async def update_pizza(db: Database, uuid: str) -> dict | None:
    """
    Touch a pizza's updated_at. The name is left as is.
    """
    return await _fetch_one(
        db,
        "update",
        """
        UPDATE pizzas
        SET updated_at = now()
        WHERE uuid = $1
        RETURNING uuid, pizza_name
        """,
        uuid,
    )


async def delete_pizza(db: Database, uuid: str) -> dict | None:
    return await _fetch_one(
        db,
        "delete",
        """
        DELETE FROM pizzas
        WHERE uuid = $1
        RETURNING uuid, pizza_name
        """,
        uuid,
    )
