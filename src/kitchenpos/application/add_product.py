"""Application service: Add Product use case."""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from kitchenpos.domain.exceptions import ValidationError
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money
from kitchenpos.domain.repository.product_repository import ProductRepository
from kitchenpos.domain.service.profanity_checker import ProfanityChecker

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        profanity_checker: ProfanityChecker,
    ) -> None:
        self._product_repo = product_repo
        self._profanity_checker = profanity_checker

    def handle(self, name: str | None, price: str | Decimal | None) -> Product:
        """Add a new product to the catalog."""
        product_price = Money.of(price)

        if name is None:
            raise ValidationError("Product name is required")
        if self._profanity_checker.contains_profanity(name):
            raise ValidationError(f"Product name '{name}' contains profanity")

        product = Product(id=str(uuid.uuid4()), name=name, price=product_price)
        self._product_repo.save(product)
        logger.info("Added product %s '%s' at %s", product.id, product.name, product.price)
        return product
