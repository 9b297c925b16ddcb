"""JSON-file-backed implementation of MenuGroupRepository."""

from __future__ import annotations

import json
from pathlib import Path

from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository


class JsonMenuGroupRepository(MenuGroupRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_id(self, menu_group_id: str) -> MenuGroup | None:
        for raw in self._load_raw():
            if raw["id"] == menu_group_id:
                return MenuGroup(id=raw["id"], name=raw["name"])
        return None

    def list_all(self) -> list[MenuGroup]:
        return [MenuGroup(id=raw["id"], name=raw["name"]) for raw in self._load_raw()]

    def save(self, menu_group: MenuGroup) -> None:
        records = [r for r in self._load_raw() if r["id"] != menu_group.id]
        records.append({"id": menu_group.id, "name": menu_group.name})
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
