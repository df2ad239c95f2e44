"""
Pydantic schemas for pizza endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BuyPizzaRequest(BaseModel):
    pizza_name: str = Field(..., min_length=1)


class Pizza(BaseModel):
    uuid: str
    pizza_name: str
