"""
Pizza error kinds and their HTTP mapping.

Every failure a pizza route can return is one of these kinds. The status and
message for each kind live only in `_RESPONSES`.
"""

from __future__ import annotations

from enum import Enum

from fastapi import HTTPException, status


class PizzaErrorKind(str, Enum):
    NO_PIZZAS_FOUND = "no_pizzas_found"
    PIZZA_CREATION_FAILURE = "pizza_creation_failure"
    NO_SUCH_PIZZA_FOUND = "no_such_pizza_found"


_RESPONSES: dict[PizzaErrorKind, tuple[int, str]] = {
    PizzaErrorKind.NO_PIZZAS_FOUND: (status.HTTP_404_NOT_FOUND, "no pizzas found"),
    PizzaErrorKind.PIZZA_CREATION_FAILURE: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "pizza creation failure",
    ),
    PizzaErrorKind.NO_SUCH_PIZZA_FOUND: (status.HTTP_404_NOT_FOUND, "no such pizza found"),
}


class PizzaError(HTTPException):
    def __init__(self, kind: PizzaErrorKind) -> None:
        status_code, message = _RESPONSES[kind]
        super().__init__(status_code=status_code, detail=message)
        self.kind = kind
