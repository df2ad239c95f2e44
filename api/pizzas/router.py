"""
Pizza API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from core.db import Database

from . import schemas, service
from .dependencies import get_database
from .errors import PizzaError, PizzaErrorKind

router = APIRouter()


@router.get("/pizzas")
async def get_pizzas(db: Database = Depends(get_database)) -> list[schemas.Pizza]:
    return await service.list_pizzas(db)


@router.post(
    "/buypizza",
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schemas.BuyPizzaRequest.model_json_schema()}},
        }
    },
)
async def buy_pizza(
    request: Request,
    db: Database = Depends(get_database),
) -> schemas.Pizza:
    """
    Create a pizza from `{"pizza_name": "..."}`.

    The body is parsed here rather than declared as a schema parameter, so an
    unreadable body fails as a creation failure instead of a 422.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        raise PizzaError(PizzaErrorKind.PIZZA_CREATION_FAILURE) from exc
    return await service.buy_pizza(db, payload)


@router.patch("/updatepizza/{uuid}")
async def update_pizza(uuid: str, db: Database = Depends(get_database)) -> schemas.Pizza:
    return await service.update_pizza(db, uuid)


@router.delete("/deletepizza/{uuid}")
async def delete_pizza(uuid: str, db: Database = Depends(get_database)) -> schemas.Pizza:
    return await service.delete_pizza(db, uuid)
