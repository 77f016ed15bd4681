# multipane_shop/cli/runner.py

"""Headless helpers: catalog listing and start-up product lookup."""

import json
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from multipane_shop.models.catalog import Catalog
from multipane_shop.models.product import Product

logger = logging.getLogger("multipane_shop.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def resolve_product(catalog: Catalog, name: str) -> Product:
    """Find the product called *name* in *catalog*.

    Raises ``SystemExit`` on unknown names after listing the valid ones.
    """
    product = catalog.find_by_name(name)
    if product is None:
        valid = ", ".join(escape(p.name) for p in catalog)
        logger.error("Unknown product '%s'", name)
        _err.print(f"[red]Unknown product: {escape(name)}[/red]")
        _err.print(f"[dim]Available: {valid}[/dim]")
        raise SystemExit(1)
    return product


def _products_to_dicts(products: Catalog) -> list[dict[str, str]]:
    """Serialise the catalog to plain dicts for JSON output."""
    return [
        {
            "id": p.product_id,
            "name": p.name,
            "price": p.price,
            "description": p.description,
        }
        for p in products
    ]


def _print_table(catalog: Catalog) -> None:
    """Render a Rich table of the catalog to stdout."""
    table = Table(
        title="Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Description")

    for idx, p in enumerate(catalog, 1):
        table.add_row(str(idx), p.name, p.price, p.description)

    Console().print(table)


def print_catalog(catalog: Catalog, output_format: str) -> int:
    """Write the catalog to stdout and return an exit code."""
    if len(catalog) == 0:
        _err.print("[yellow]Catalog is empty.[/yellow]")
        return 1

    if output_format == "table":
        _print_table(catalog)
    else:
        json.dump(
            _products_to_dicts(catalog),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    logger.info("Listed %d products as %s", len(catalog), output_format)
    return 0
