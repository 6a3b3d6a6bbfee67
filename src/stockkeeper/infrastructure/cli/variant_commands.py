"""CLI commands for the variant catalog."""

from __future__ import annotations

import click

from stockkeeper.application.add_variant import AddVariantHandler
from stockkeeper.domain.exceptions import DomainException
from stockkeeper.infrastructure.bootstrap import variant_repository


@click.command("add")
@click.option("--name", required=True, help="Variant name.")
@click.option("--sku", default=None, help="SKU (derived from the name if omitted).")
def variant_add(name: str, sku: str | None) -> None:
    """Add a new variant to the catalog."""
    handler = AddVariantHandler(variant_repo=variant_repository())

    try:
        variant = handler.handle(name=name, sku=sku)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant {variant.id} '{variant.name}' added")


@click.command("list")
def variant_list() -> None:
    """List all variants in the catalog."""
    variants = variant_repository().list_all()

    if not variants:
        click.echo("No variants found.")
        return

    click.echo(f"{'SKU':<16} {'Name':<20}")
    click.echo("-" * 37)
    for v in variants:
        click.echo(f"{v.id:<16} {v.name:<20}")
