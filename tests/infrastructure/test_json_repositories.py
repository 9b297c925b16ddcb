"""Tests for the JSON-file repositories, using pytest's tmp_path."""

from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.infrastructure.persistence.json_menu_group_repository import (
    JsonMenuGroupRepository,
)
from kitchenpos.infrastructure.persistence.json_menu_repository import JsonMenuRepository
from kitchenpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        repo = JsonProductRepository(path)
        assert path.read_text(encoding="utf-8") == "[]"
        assert repo.list_all() == []

    def test_find_all_by_ids_skips_unknown(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="p1", name="Chicken", price=Money.of("15000.50")))
        found = repo.find_all_by_ids(["p1", "missing"])
        assert [p.id for p in found] == ["p1"]
        assert found[0].price == Money.of("15000.50")

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="p1", name="Chicken", price=Money.of("15000")))
        repo.save(Product(id="p1", name="Chicken", price=Money.of("9000")))
        assert repo.get_by_id("p1").price == Money.of("9000")
        assert len(repo.list_all()) == 1


class TestJsonMenuGroupRepository:

    def test_save_and_lookup(self, tmp_path):
        repo = JsonMenuGroupRepository(tmp_path / "menu_groups.json")
        repo.save(MenuGroup(id="g1", name="Set menus"))
        assert repo.get_by_id("g1") == MenuGroup(id="g1", name="Set menus")
        assert repo.get_by_id("g2") is None


class TestJsonMenuRepository:

    def _menu(self, displayed: bool = False) -> Menu:
        return Menu(
            id="m1",
            name="Chicken & Pasta",
            price=Money.of("30000"),
            menu_group=MenuGroup(id="g1", name="Set menus"),
            menu_products=[
                MenuProduct(
                    product=Product(id="p1", name="Chicken", price=Money.of("15000")),
                    quantity=Quantity(2),
                ),
            ],
            displayed=displayed,
        )

    def test_reconstitutes_menu(self, tmp_path):
        repo = JsonMenuRepository(tmp_path / "menus.json")
        repo.save(self._menu())

        loaded = repo.get_by_id("m1")
        assert loaded == self._menu()

    def test_save_updates_in_place(self, tmp_path):
        repo = JsonMenuRepository(tmp_path / "menus.json")
        repo.save(self._menu())
        repo.save(self._menu(displayed=True))

        menus = repo.list_all()
        assert len(menus) == 1
        assert menus[0].displayed is True

    def test_unknown_menu_is_none(self, tmp_path):
        assert JsonMenuRepository(tmp_path / "menus.json").get_by_id("nope") is None
