# multipane_shop/ui/widgets.py

"""List and detail widgets shared by both layout strategies."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Label, ListItem, ListView, Static

from multipane_shop.models.catalog import Catalog
from multipane_shop.models.product import Product
from multipane_shop.services.presentation import (
    PLACEHOLDER_MESSAGE,
    detail_lines,
)
from multipane_shop.services.selection_state import is_selected


class ProductRow(ListItem):
    """One catalog row showing the product name."""

    def __init__(self, product: Product, index: int, selected: bool) -> None:
        super().__init__(
            Label(product.name, markup=False),
            id=f"row-{index}",
            classes="selected" if selected else None,
        )
        self.product = product


class ProductList(Widget):
    """The catalog as a selectable list, one row per product in order."""

    class ProductChosen(Message):
        """Posted when a row is activated."""

        def __init__(self, product: Product) -> None:
            self.product = product
            super().__init__()

    def __init__(
        self,
        catalog: Catalog,
        selected: Product | None,
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.catalog = catalog
        self.selected = selected

    def compose(self) -> ComposeResult:
        yield ListView(
            *(
                ProductRow(product, index, is_selected(product, self.selected))
                for index, product in enumerate(self.catalog)
            ),
            id="product_rows",
        )

    @property
    def rows(self) -> list[ProductRow]:
        return list(self.query(ProductRow))

    def mark_selected(self, selected: Product | None) -> None:
        """Move the accent highlight to *selected* (or remove it)."""
        self.selected = selected
        for row in self.query(ProductRow):
            row.set_class(is_selected(row.product, selected), "selected")

    def focus_rows(self) -> None:
        self.query_one("#product_rows", ListView).focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        if isinstance(event.item, ProductRow):
            self.post_message(self.ProductChosen(event.item.product))


class ProductDetails(Vertical):
    """Fields of the selected product, or a prompt when there is none.

    With a product: name, ``Price: ...``, description and a Back button.
    Without one: only the placeholder, and nothing to click.
    """

    class BackRequested(Message):
        """Posted when the Back button is pressed."""

    def __init__(
        self, product: Product | None, *, id: str | None = None
    ) -> None:
        super().__init__(id=id)
        self.product = product

    def compose(self) -> ComposeResult:
        with Vertical(id="detail_fields"):
            yield Static("", id="detail_name", markup=False)
            yield Static("", id="detail_price", markup=False)
            yield Static("", id="detail_description", markup=False)
            yield Button("Back", id="back_btn", variant="primary")
        yield Static(PLACEHOLDER_MESSAGE, id="detail_placeholder", markup=False)

    def on_mount(self) -> None:
        self.show_product(self.product)

    @property
    def lines(self) -> tuple[str, ...]:
        """The text currently presented to the user."""
        return detail_lines(self.product)

    def show_product(self, product: Product | None) -> None:
        """Render *product*, or the placeholder when it is ``None``."""
        self.product = product
        if not self.is_mounted:
            return

        fields = self.query_one("#detail_fields", Vertical)
        placeholder = self.query_one("#detail_placeholder", Static)
        if product is None:
            fields.display = False
            placeholder.display = True
            return

        name, price, description = detail_lines(product)
        self.query_one("#detail_name", Static).update(name)
        self.query_one("#detail_price", Static).update(price)
        self.query_one("#detail_description", Static).update(description)
        fields.display = True
        placeholder.display = False

    def focus_back(self) -> None:
        if self.product is not None:
            self.query_one("#back_btn", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "back_btn":
            event.stop()
            self.post_message(self.BackRequested())
