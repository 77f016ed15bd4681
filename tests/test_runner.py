# tests/test_runner.py

"""Tests for the headless catalog listing and the CLI parser."""

import io
import json
import logging
import unittest
from unittest.mock import MagicMock, patch

from rich.console import Console

from main import _build_parser, _run_tui
from multipane_shop.cli.runner import print_catalog, resolve_product
from multipane_shop.models.catalog import Catalog, default_catalog
from multipane_shop.services.presentation import Orientation


class TestPrintCatalog(unittest.TestCase):
    """print_catalog output formats."""

    def test_json_output_lists_products_in_order(self) -> None:
        buffer = io.StringIO()
        with patch("sys.stdout", buffer):
            exit_code = print_catalog(default_catalog(), "json")

        self.assertEqual(exit_code, 0)
        data = json.loads(buffer.getvalue())
        self.assertEqual(
            [row["name"] for row in data],
            ["Whole Milk", "Fat Free Lactaid", "Fat Free Fairlife"],
        )
        self.assertEqual(data[1]["price"], "$5.50")
        self.assertEqual(data[1]["id"], "fat-free-lactaid")

    def test_table_output_uses_rich(self) -> None:
        with patch("multipane_shop.cli.runner.Console") as mock_console:
            exit_code = print_catalog(default_catalog(), "table")

        self.assertEqual(exit_code, 0)
        mock_console.return_value.print.assert_called_once()
        table = mock_console.return_value.print.call_args[0][0]
        self.assertEqual(table.row_count, 3)

    def test_empty_catalog_fails(self) -> None:
        with patch("multipane_shop.cli.runner._err"):
            self.assertEqual(print_catalog(Catalog([]), "json"), 1)


class TestResolveProduct(unittest.TestCase):
    """Start-up product lookup by name."""

    def test_known_name(self) -> None:
        product = resolve_product(default_catalog(), "whole milk")
        self.assertEqual(product.product_id, "whole-milk")

    def test_unknown_name_exits(self) -> None:
        with patch("multipane_shop.cli.runner._err") as mock_err:
            with self.assertRaises(SystemExit) as ctx:
                resolve_product(default_catalog(), "Oat Milk")
        self.assertEqual(ctx.exception.code, 1)
        self.assertTrue(mock_err.print.called)

    def test_name_with_markup_tags_exits_cleanly(self) -> None:
        """A bracketed name is printed literally instead of parsed as markup."""
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=False)
        with patch("multipane_shop.cli.runner._err", console):
            with self.assertRaises(SystemExit) as ctx:
                resolve_product(default_catalog(), "[/red]")
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Unknown product: [/red]", buffer.getvalue())


class TestParser(unittest.TestCase):
    """Argument parsing for main.py."""

    def test_defaults_launch_tui(self) -> None:
        args = _build_parser().parse_args([])
        self.assertFalse(args.list_catalog)
        self.assertIsNone(args.orientation)
        self.assertIsNone(args.select)
        self.assertEqual(args.output_format, "json")

    def test_list_with_table_format(self) -> None:
        args = _build_parser().parse_args(["--list", "-f", "table"])
        self.assertTrue(args.list_catalog)
        self.assertEqual(args.output_format, "table")

    def test_rejects_unknown_orientation(self) -> None:
        with patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                _build_parser().parse_args(["--orientation", "sideways"])


class TestRunTui(unittest.TestCase):
    """Wiring from CLI flags into the app."""

    def test_select_and_orientation_passed_to_app(self) -> None:
        args = _build_parser().parse_args(
            ["--orientation", "portrait", "--select", "Fat Free Lactaid"]
        )
        with patch("multipane_shop.ui.app.ShoppingApp") as mock_app:
            mock_app.return_value = MagicMock()
            _run_tui(args)

        kwargs = mock_app.call_args.kwargs
        self.assertIs(kwargs["orientation"], Orientation.PORTRAIT)
        self.assertEqual(
            kwargs["saved_state"], {"product_id": "fat-free-lactaid"}
        )
        mock_app.return_value.run.assert_called_once()

    def test_console_handler_detached_while_app_runs(self) -> None:
        """Warnings during the TUI run go to the log file, not stderr."""
        args = _build_parser().parse_args([])
        root_logger = logging.getLogger("multipane_shop")
        console_handler = logging.StreamHandler(io.StringIO())
        root_logger.addHandler(console_handler)
        attached_during_run: list[bool] = []

        def _run() -> None:
            attached_during_run.append(
                console_handler in root_logger.handlers
            )

        try:
            with patch("multipane_shop.ui.app.ShoppingApp") as mock_app:
                mock_app.return_value.run.side_effect = _run
                _run_tui(args)
            self.assertEqual(attached_during_run, [False])
            self.assertIn(console_handler, root_logger.handlers)
        finally:
            root_logger.removeHandler(console_handler)


if __name__ == "__main__":
    unittest.main()
