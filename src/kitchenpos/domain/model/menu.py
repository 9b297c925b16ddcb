"""Menu aggregate — a priced bundle of products shown to customers.

The Menu owns its MenuProduct lines. Rules that need live product
prices (price ceiling, display gate) are checked against a total the
caller computes with ``MenuPricingService``; the aggregate itself only
compares.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kitchenpos.domain.exceptions import InvalidStateError, ValidationError
from kitchenpos.domain.model.menu_group import MenuGroup
from kitchenpos.domain.model.product import Product
from kitchenpos.domain.model.value_objects import Money, Quantity


@dataclass
class MenuProduct:
    """One line of a menu: a product and how many of it.

    ``product`` is the snapshot resolved when the line was created. It is
    kept for display only; price checks always re-read the product.
    """

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id


@dataclass
class Menu:
    """Aggregate root for menus.

    Invariants:
    - ``menu_products`` is never empty
    - ``price`` never exceeds the live value of ``menu_products``
    - ``displayed`` only becomes True while the price invariant holds

    Use ``Menu.create()`` for new menus. The ``__init__`` stays plain so
    repositories can reconstitute stored menus without re-validating.
    """

    id: str
    name: str
    price: Money
    menu_group: MenuGroup
    menu_products: list[MenuProduct] = field(default_factory=list)
    displayed: bool = False

    # --- Factory (used for NEW menus only) ------------------------------------

    @staticmethod
    def create(
        id: str,
        name: str,
        price: Money,
        menu_group: MenuGroup,
        menu_products: list[MenuProduct],
        total: Money,
        displayed: bool = False,
    ) -> Menu:
        """Create a new menu, given the live *total* of its lines."""
        if not menu_products:
            raise ValidationError("Menu must contain at least one product")
        _ensure_within(price, total)
        if not name or not name.strip():
            raise ValidationError("Menu name is required")
        return Menu(
            id=id,
            name=name,
            price=price,
            menu_group=menu_group,
            menu_products=list(menu_products),
            displayed=displayed,
        )

    # --- Mutations ------------------------------------------------------------

    def change_price(self, new_price: Money, total: Money) -> None:
        _ensure_within(new_price, total)
        self.price = new_price

    def display(self, total: Money) -> None:
        """Transition to displayed; refused while the menu is overpriced."""
        if self.price > total:
            raise InvalidStateError(
                f"Menu '{self.name}' cannot be displayed: price {self.price} "
                f"exceeds the value of its products {total}"
            )
        self.displayed = True

    def hide(self) -> None:
        self.displayed = False

    # --- Queries --------------------------------------------------------------

    @property
    def product_ids(self) -> list[str]:
        return [line.product_id for line in self.menu_products]

    def contains_product(self, product_id: str) -> bool:
        return product_id in self.product_ids

    def is_overpriced(self, total: Money) -> bool:
        return self.price > total


def _ensure_within(price: Money, total: Money) -> None:
    if price > total:
        raise ValidationError(
            f"Menu price {price} exceeds the value of its products {total}"
        )
