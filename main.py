# main.py

"""Entry point for the multipane_shop browser (TUI or headless listing)."""

import argparse
import logging
import sys

from multipane_shop.config.logging_config import (
    console_suspended,
    setup_logging,
)
from multipane_shop.config.settings import Settings, parse_orientation
from multipane_shop.models.catalog import default_catalog

logger = logging.getLogger("multipane_shop.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="multipane-shop",
        description="Two-pane shopping catalog browser.",
        epilog=(
            f"The {Settings.ORIENTATION_ENV_VAR} environment variable "
            "sets the default orientation."
        ),
    )
    parser.add_argument(
        "--orientation",
        choices=Settings.ORIENTATION_CHOICES,
        default=None,
        help="Force the layout orientation (default: follow terminal size).",
    )
    parser.add_argument(
        "--select",
        default=None,
        metavar="NAME",
        help="Start with the named product selected.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        default=False,
        dest="list_catalog",
        help="Print the catalog and exit instead of launching the TUI.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for --list (default: json).",
    )
    return parser


def _run_tui(args: argparse.Namespace) -> None:
    """Launch the interactive Textual TUI."""
    from multipane_shop.cli.runner import resolve_product
    from multipane_shop.ui.app import ShoppingApp

    catalog = default_catalog()
    saved_state = None
    if args.select is not None:
        product = resolve_product(catalog, args.select)
        saved_state = {"product_id": product.product_id}

    orientation = (
        parse_orientation(args.orientation)
        if args.orientation is not None
        else None
    )

    try:
        app = ShoppingApp(
            catalog=catalog,
            orientation=orientation,
            saved_state=saved_state,
        )
        with console_suspended():
            app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("multipane_shop TUI shutting down")


def _run_list(args: argparse.Namespace) -> None:
    """Print the catalog headlessly and exit."""
    from multipane_shop.cli.runner import print_catalog

    exit_code = print_catalog(default_catalog(), args.output_format)
    sys.exit(exit_code)


def main() -> None:
    """Route to the TUI (default) or the headless catalog listing."""
    log_file = setup_logging()
    logger.info("multipane_shop starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.list_catalog:
        _run_list(args)
    else:
        _run_tui(args)


if __name__ == "__main__":
    main()
