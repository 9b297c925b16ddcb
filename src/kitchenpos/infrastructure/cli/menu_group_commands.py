"""CLI commands for menu groups."""

from __future__ import annotations

import click

from kitchenpos.application.create_menu_group import CreateMenuGroupHandler
from kitchenpos.application.list_menu_groups import ListMenuGroupsHandler
from kitchenpos.domain.exceptions import DomainException
from kitchenpos.infrastructure.bootstrap import menu_group_repository


@click.command("add")
@click.option("--name", required=True, help="Menu group name.")
def menu_group_add(name: str) -> None:
    """Register a new menu group."""
    handler = CreateMenuGroupHandler(menu_group_repository())

    try:
        group = handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu group {group.id} '{group.name}' added")


@click.command("list")
def menu_group_list() -> None:
    """List all menu groups."""
    groups = ListMenuGroupsHandler(menu_group_repository()).handle()

    if not groups:
        click.echo("No menu groups found.")
        return

    for g in groups:
        click.echo(f"{g.id:<36}  {g.name}")
