"""Application service: List Menu Groups use case (query)."""

from __future__ import annotations

from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository


class ListMenuGroupsHandler:

    def __init__(self, menu_group_repo: MenuGroupRepository) -> None:
        self._menu_group_repo = menu_group_repo

    def handle(self) -> list[MenuGroup]:
        return self._menu_group_repo.list_all()
