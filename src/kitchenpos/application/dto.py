"""Data Transfer Objects — plain containers that cross layer boundaries.

Requests are kept separate from the Menu aggregate so that what the
caller sent is never the object that gets stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class MenuProductSpec:
    """Input: one requested menu line (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class MenuSpec:
    """Input: a menu the caller wants to register."""

    name: str | None
    price: str | Decimal | None
    menu_group_id: str
    menu_products: list[MenuProductSpec] = field(default_factory=list)
    displayed: bool = False
