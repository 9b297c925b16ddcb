"""Application service: Change Product Price use case.

A cheaper product can push menus that contain it above the value of
their lines. Those menus are hidden in the same operation so no
overpriced menu stays on display.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService

logger = logging.getLogger(__name__)


class ChangeProductPriceHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        menu_repo: MenuRepository,
    ) -> None:
        self._product_repo = product_repo
        self._menu_repo = menu_repo
        self._pricing = MenuPricingService(product_repo)

    def handle(self, product_id: str, new_price: str | Decimal | None) -> Product:
        price = Money.of(new_price)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.change_price(price)
        self._product_repo.save(product)
        logger.info("Product %s price changed to %s", product.id, product.price)

        for menu in self._menu_repo.list_all():
            if not menu.contains_product(product.id):
                continue
            if menu.displayed and menu.is_overpriced(self._pricing.live_total(menu)):
                menu.hide()
                self._menu_repo.save(menu)
                logger.warning(
                    "Hid menu %s: price %s now exceeds its products", menu.id, menu.price
                )

        return product
