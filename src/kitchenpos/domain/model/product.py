"""Product aggregate.

Products live independently of menus. Menus reference them by id and
always re-read the current price when checking their own price.
"""

from __future__ import annotations

from dataclasses import dataclass

from kitchenpos.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money

    def change_price(self, new_price: Money) -> None:
        self.price = new_price
