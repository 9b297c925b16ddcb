"""Application service: Change Menu Price use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService

logger = logging.getLogger(__name__)


class ChangeMenuPriceHandler:

    def __init__(
        self,
        menu_repo: MenuRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._menu_repo = menu_repo
        self._pricing = MenuPricingService(product_repo)

    def handle(self, menu_id: str, new_price: str | Decimal | None) -> Menu:
        """Reprice a menu.

        The ceiling is recomputed from the stored lines at the products'
        current prices. Name, group, lines and display state are untouched.
        """
        price = Money.of(new_price)

        menu = self._menu_repo.get_by_id(menu_id)
        if menu is None:
            raise EntityNotFoundError(f"Menu with ID '{menu_id}' not found")

        menu.change_price(price, self._pricing.live_total(menu))
        self._menu_repo.save(menu)
        logger.info("Menu %s price changed to %s", menu.id, menu.price)
        return menu
