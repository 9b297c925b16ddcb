"""Application service: Hide Menu use case. Hiding is always allowed."""

from __future__ import annotations

import logging

from kitchenpos.domain.exceptions import EntityNotFoundError
from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.repository.menu_repository import MenuRepository

logger = logging.getLogger(__name__)


class HideMenuHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, menu_id: str) -> Menu:
        menu = self._menu_repo.get_by_id(menu_id)
        if menu is None:
            raise EntityNotFoundError(f"Menu with ID '{menu_id}' not found")

        menu.hide()
        self._menu_repo.save(menu)
        logger.info("Menu %s is now hidden", menu.id)
        return menu
