"""Integration tests for the CreateMenuGroup use case."""

import pytest

from kitchenpos.application.create_menu_group import CreateMenuGroupHandler
from kitchenpos.application.list_menu_groups import ListMenuGroupsHandler
from kitchenpos.domain.exceptions import ValidationError
from tests.fakes import FakeMenuGroupRepository


class TestCreateMenuGroup:

    def test_creates_group(self):
        repo = FakeMenuGroupRepository()
        group = CreateMenuGroupHandler(repo).handle("Set menus")
        assert repo.get_by_id(group.id) == group
        assert [g.name for g in ListMenuGroupsHandler(repo).handle()] == ["Set menus"]

    def test_name_is_trimmed(self):
        group = CreateMenuGroupHandler(FakeMenuGroupRepository()).handle("  Sides ")
        assert group.name == "Sides"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name is required"):
            CreateMenuGroupHandler(FakeMenuGroupRepository()).handle(name)
