"""Domain service: Menu Pricing.

Computes what a menu's lines are worth at the *current* product prices.
It lives in the domain layer because the price ceiling and display gate
of a menu are business rules that span two aggregates (Menu and
Product).

Prices are always read fresh from the product repository; the product
snapshot stored on a MenuProduct line is never used for the check.
"""

from __future__ import annotations

from collections.abc import Iterable

from kitchenpos.domain.exceptions import ValidationError
from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.repository.product_repository import ProductRepository


class MenuPricingService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def load_products(self, product_ids: list[str]) -> dict[str, Product]:
        """Resolve every id to its Product, keyed by id.

        Raises ValidationError if any id is unknown: the caller asked
        for something that is not a product.
        """
        wanted = set(product_ids)
        products = {
            p.id: p
            for p in self._product_repo.find_all_by_ids(list(wanted))
            if p is not None
        }
        missing = [pid for pid in product_ids if pid not in products]
        if missing:
            raise ValidationError(f"Unknown product ID(s): {', '.join(missing)}")
        return products

    @staticmethod
    def total_of(
        lines: Iterable[tuple[str, Quantity]],
        products: dict[str, Product],
    ) -> Money:
        """Sum ``price × quantity`` over (product_id, quantity) pairs."""
        total = Money.zero()
        for product_id, quantity in lines:
            total = total + products[product_id].price * quantity.value
        return total

    def live_total(self, menu: Menu) -> Money:
        """Value of *menu*'s lines at current product prices."""
        products = self.load_products(menu.product_ids)
        return self.total_of(
            ((line.product_id, line.quantity) for line in menu.menu_products),
            products,
        )
