"""Application service: List Menus use case (query)."""

from __future__ import annotations

from kitchenpos.domain.model.menu import Menu
from kitchenpos.domain.repository.menu_repository import MenuRepository


class ListMenusHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self) -> list[Menu]:
        return self._menu_repo.list_all()
