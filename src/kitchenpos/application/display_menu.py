"""Application service: Display Menu use case.

A menu may only be shown while its price does not exceed the current
value of its products. Refusal is a state conflict, not a bad request.
"""

from __future__ import annotations

import logging

from kitchenpos.domain.exceptions import EntityNotFoundError, InvalidStateError
from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService

logger = logging.getLogger(__name__)


class DisplayMenuHandler:

    def __init__(
        self,
        menu_repo: MenuRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._menu_repo = menu_repo
        self._pricing = MenuPricingService(product_repo)

    def handle(self, menu_id: str) -> Menu:
        menu = self._menu_repo.get_by_id(menu_id)
        if menu is None:
            raise EntityNotFoundError(f"Menu with ID '{menu_id}' not found")

        try:
            menu.display(self._pricing.live_total(menu))
        except InvalidStateError:
            logger.warning("Refused to display overpriced menu %s", menu.id)
            raise

        self._menu_repo.save(menu)
        logger.info("Menu %s is now displayed", menu.id)
        return menu
