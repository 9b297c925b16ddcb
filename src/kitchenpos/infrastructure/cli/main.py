import logging

import click

from kitchenpos.infrastructure.bootstrap import settings
from kitchenpos.infrastructure.cli.menu_commands import (
    menu_change_price,
    menu_create,
    menu_display,
    menu_hide,
    menu_list,
)
from kitchenpos.infrastructure.cli.menu_group_commands import (
    menu_group_add,
    menu_group_list,
)
from kitchenpos.infrastructure.cli.product_commands import (
    product_add,
    product_change_price,
    product_list,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """kitchenpos — restaurant menu management"""
    level = logging.INFO if verbose else settings().log_level
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group("menu-group")
def menu_group() -> None:
    """Manage menu groups."""


@cli.group()
def menu() -> None:
    """Manage menus."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_change_price)
product.add_command(product_list)
menu_group.add_command(menu_group_add)
menu_group.add_command(menu_group_list)
menu.add_command(menu_change_price)
menu.add_command(menu_create)
menu.add_command(menu_display)
menu.add_command(menu_hide)
menu.add_command(menu_list)
