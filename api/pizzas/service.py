"""
Pizza business logic.

Scope:
- list / buy / update / delete over the shared database handle
- mapping of repository absence (None) to `PizzaError` kinds
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from core.db import Database

from . import repository, schemas
from .errors import PizzaError, PizzaErrorKind

logger = logging.getLogger(__name__)


def _to_pizza(row: dict) -> schemas.Pizza:
    return schemas.Pizza(
        uuid=str(row["uuid"]),
        pizza_name=str(row["pizza_name"]),
    )


def new_pizza_uuid() -> str:
    return uuid4().hex


async def list_pizzas(db: Database) -> list[schemas.Pizza]:
    rows = await repository.list_pizzas(db)
    # An empty store is reported the same way as a failed query.
    if not rows:
        logger.warning("no_pizzas_found failed=%s", rows is None)
        raise PizzaError(PizzaErrorKind.NO_PIZZAS_FOUND)
    return [_to_pizza(row) for row in rows]


def parse_buy_request(payload: Any) -> schemas.BuyPizzaRequest:
    # Bad input is not told apart from a failed insert.
    try:
        return schemas.BuyPizzaRequest.model_validate(payload)
    except ValidationError as exc:
        logger.warning("buy_pizza_invalid errors=%s", exc.errors())
        raise PizzaError(PizzaErrorKind.PIZZA_CREATION_FAILURE) from exc


async def buy_pizza(db: Database, payload: Any) -> schemas.Pizza:
    request = parse_buy_request(payload)
    pizza_uuid = new_pizza_uuid()

    row = await repository.insert_pizza(db, uuid=pizza_uuid, pizza_name=request.pizza_name)
    if row is None:
        logger.warning("buy_pizza_failed uuid=%s", pizza_uuid)
        raise PizzaError(PizzaErrorKind.PIZZA_CREATION_FAILURE)

    logger.info("pizza_created uuid=%s", pizza_uuid)
    return _to_pizza(row)


async def update_pizza(db: Database, pizza_uuid: str) -> schemas.Pizza:
    row = await repository.update_pizza(db, pizza_uuid)
    if row is None:
        logger.warning("update_pizza_not_found uuid=%s", pizza_uuid)
        raise PizzaError(PizzaErrorKind.NO_SUCH_PIZZA_FOUND)
    return _to_pizza(row)


async def delete_pizza(db: Database, pizza_uuid: str) -> schemas.Pizza:
    row = await repository.delete_pizza(db, pizza_uuid)
    if row is None:
        logger.warning("delete_pizza_not_found uuid=%s", pizza_uuid)
        raise PizzaError(PizzaErrorKind.NO_SUCH_PIZZA_FOUND)

    logger.info("pizza_deleted uuid=%s", pizza_uuid)
    return _to_pizza(row)
