"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from kitchenpos.infrastructure.config import Settings
from kitchenpos.infrastructure.persistence.json_menu_group_repository import (
    JsonMenuGroupRepository,
)
from kitchenpos.infrastructure.persistence.json_menu_repository import (
    JsonMenuRepository,
)
from kitchenpos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from kitchenpos.infrastructure.profanity.purgomalum_client import (
    PurgomalumProfanityChecker,
)


def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def menu_group_repository() -> JsonMenuGroupRepository:
    return JsonMenuGroupRepository(settings().data_dir / "menu_groups.json")


def menu_repository() -> JsonMenuRepository:
    return JsonMenuRepository(settings().data_dir / "menus.json")


def profanity_checker() -> PurgomalumProfanityChecker:
    cfg = settings()
    return PurgomalumProfanityChecker(
        base_url=cfg.purgomalum_url, timeout=cfg.purgomalum_timeout
    )
