"""JSON-file-backed implementation of MenuRepository.

Each menu record embeds its group and the product snapshot of every
line, so a menu can be shown without touching the other files.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.repository.menu_repository import MenuRepository


class JsonMenuRepository(MenuRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- MenuRepository interface ---------------------------------------------

    def get_by_id(self, menu_id: str) -> Menu | None:
        for raw in self._load_raw():
            if raw["id"] == menu_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Menu]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, menu: Menu) -> None:
        menus = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(menus):
            if raw["id"] == menu.id:
                menus[i] = self._to_raw(menu)
                replaced = True
                break
        if not replaced:
            menus.append(self._to_raw(menu))

        self._persist_raw(menus)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(menu: Menu) -> dict:
        return {
            "id": menu.id,
            "name": menu.name,
            "price": str(menu.price.amount),
            "displayed": menu.displayed,
            "menu_group": {"id": menu.menu_group.id, "name": menu.menu_group.name},
            "menu_products": [
                {
                    "product_id": line.product.id,
                    "product_name": line.product.name,
                    "product_price": str(line.product.price.amount),
                    "quantity": line.quantity.value,
                }
                for line in menu.menu_products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Menu:
        lines = [
            MenuProduct(
                product=Product(
                    id=line["product_id"],
                    name=line["product_name"],
                    price=Money(Decimal(line["product_price"])),
                ),
                quantity=Quantity(line["quantity"]),
            )
            for line in raw["menu_products"]
        ]
        return Menu(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            menu_group=MenuGroup(**raw["menu_group"]),
            menu_products=lines,
            displayed=raw.get("displayed", False),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, menus: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(menus, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
