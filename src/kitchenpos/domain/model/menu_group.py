"""MenuGroup — a category every menu belongs to."""

from __future__ import annotations

from dataclasses import dataclass

from kitchenpos.domain.exceptions import ValidationError


@dataclass(frozen=True)
class MenuGroup:

    id: str
    name: str

    @staticmethod
    def create(id: str, name: str | None) -> MenuGroup:
        if not name or not name.strip():
            raise ValidationError("Menu group name is required")
        return MenuGroup(id=id, name=name.strip())
