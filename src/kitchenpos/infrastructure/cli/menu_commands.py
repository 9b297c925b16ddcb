"""CLI commands for the Menu aggregate."""

from __future__ import annotations

import click

from kitchenpos.application.change_menu_price import ChangeMenuPriceHandler
from kitchenpos.application.create_menu import CreateMenuHandler
from kitchenpos.application.display_menu import DisplayMenuHandler
from kitchenpos.application.dto import MenuProductSpec, MenuSpec
from kitchenpos.application.hide_menu import HideMenuHandler
from kitchenpos.application.list_menus import ListMenusHandler
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.domain.model.menu import Menu
from kitchenpos.infrastructure.bootstrap import (
    menu_group_repository,
    menu_repository,
    product_repository,
    profanity_checker,
)


def _parse_products(raw: str) -> list[MenuProductSpec]:
    """Parse 'productId:2,productId:1' into MenuProductSpec list."""
    specs: list[MenuProductSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid product format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(MenuProductSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_menu(menu: Menu) -> None:
    """Shared formatting for displaying a menu."""
    state = "displayed" if menu.displayed else "hidden"
    click.echo(f"Menu {menu.id}  ({state})")
    click.echo(f"Name:  {menu.name}")
    click.echo(f"Group: {menu.menu_group.name}")
    click.echo(f"Price: {menu.price}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5}")
    click.echo(f"  {'-'*26}")
    for line in menu.menu_products:
        click.echo(f"  {line.product.name:<20} {line.quantity.value:>5}")


@click.command("create")
@click.option("--name", required=True, help="Menu name.")
@click.option("--price", required=True, help="Menu price.")
@click.option("--group", "menu_group_id", required=True, help="Menu group ID.")
@click.option("--products", required=True, help="Lines as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--displayed/--hidden", default=False, help="Initial display state.")
def menu_create(
    name: str, price: str, menu_group_id: str, products: str, displayed: bool
) -> None:
    """Register a new menu."""
    spec = MenuSpec(
        name=name,
        price=price,
        menu_group_id=menu_group_id,
        menu_products=_parse_products(products),
        displayed=displayed,
    )
    handler = CreateMenuHandler(
        menu_repo=menu_repository(),
        menu_group_repo=menu_group_repository(),
        product_repo=product_repository(),
        profanity_checker=profanity_checker(),
    )

    try:
        menu = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_menu(menu)


@click.command("list")
def menu_list() -> None:
    """List all menus."""
    menus = ListMenusHandler(menu_repository()).handle()

    if not menus:
        click.echo("No menus found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>12}  State")
    click.echo("-" * 80)
    for m in menus:
        state = "displayed" if m.displayed else "hidden"
        click.echo(f"{m.id:<36}  {m.name:<20} {str(m.price):>12}  {state}")


@click.command("price")
@click.option("--id", "menu_id", required=True, help="Menu ID.")
@click.option("--price", required=True, help="New price.")
def menu_change_price(menu_id: str, price: str) -> None:
    """Change a menu's price."""
    handler = ChangeMenuPriceHandler(
        menu_repo=menu_repository(),
        product_repo=product_repository(),
    )

    try:
        menu = handler.handle(menu_id=menu_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {menu.id} price changed to {menu.price}")


@click.command("display")
@click.argument("menu_id")
def menu_display(menu_id: str) -> None:
    """Show a menu to customers."""
    handler = DisplayMenuHandler(
        menu_repo=menu_repository(),
        product_repo=product_repository(),
    )

    try:
        menu = handler.handle(menu_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {menu.id} is now displayed")


@click.command("hide")
@click.argument("menu_id")
def menu_hide(menu_id: str) -> None:
    """Hide a menu from customers."""
    handler = HideMenuHandler(menu_repository())

    try:
        menu = handler.handle(menu_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu {menu.id} is now hidden")
