"""Application service: Create Menu use case.

Validates the request against the menu group, product and profanity
collaborators in a fixed order and stops at the first violation.
Nothing is written until every check has passed.
"""

from __future__ import annotations

import logging
import uuid

from kitchenpos.application.dto import MenuSpec
from kitchenpos.domain.exceptions import EntityNotFoundError, ValidationError
from kitchenpos.domain.model.menu import Menu, MenuProduct
from kitchenpos.domain.model.value_objects import Money, Quantity
from kitchenpos.domain.repository.menu_group_repository import MenuGroupRepository
from kitchenpos.domain.repository.menu_repository import MenuRepository
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.menu_pricing_service import MenuPricingService
from kitchenpos.domain.service.profanity_checker import ProfanityChecker

logger = logging.getLogger(__name__)


class CreateMenuHandler:

    def __init__(
        self,
        menu_repo: MenuRepository,
        menu_group_repo: MenuGroupRepository,
        product_repo: ProductRepository,
        profanity_checker: ProfanityChecker,
    ) -> None:
        self._menu_repo = menu_repo
        self._menu_group_repo = menu_group_repo
        self._pricing = MenuPricingService(product_repo)
        self._profanity_checker = profanity_checker

    def handle(self, spec: MenuSpec) -> Menu:
        """Register a new menu.

        Steps:
        1. Price is present and non-negative.
        2. The menu group exists.
        3. At least one product line was given.
        4. Every product id resolves to a product.
        5. Every quantity is non-negative.
        6. The price does not exceed the value of the lines.
        7. The name is present and clean.
        8. Assign an id and persist.
        """
        price = Money.of(spec.price)

        menu_group = self._menu_group_repo.get_by_id(spec.menu_group_id)
        if menu_group is None:
            raise EntityNotFoundError(
                f"Menu group with ID '{spec.menu_group_id}' not found"
            )

        if not spec.menu_products:
            raise ValidationError("Menu must contain at least one product")

        products = self._pricing.load_products(
            [line.product_id for line in spec.menu_products]
        )

        lines = [
            (line.product_id, Quantity(line.quantity)) for line in spec.menu_products
        ]

        total = self._pricing.total_of(lines, products)
        if price > total:
            raise ValidationError(
                f"Menu price {price} exceeds the value of its products {total}"
            )

        if spec.name is None:
            raise ValidationError("Menu name is required")
        if self._profanity_checker.contains_profanity(spec.name):
            raise ValidationError(f"Menu name '{spec.name}' contains profanity")

        menu = Menu.create(
            id=str(uuid.uuid4()),
            name=spec.name,
            price=price,
            menu_group=menu_group,
            menu_products=[
                MenuProduct(product=products[product_id], quantity=quantity)
                for product_id, quantity in lines
            ],
            total=total,
            displayed=spec.displayed,
        )
        self._menu_repo.save(menu)
        logger.info("Created menu %s '%s' at %s", menu.id, menu.name, menu.price)
        return menu
