# multipane_shop/ui/app.py

"""Terminal UI for the multipane_shop catalog browser."""

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import ContentSwitcher, Footer, Header

from multipane_shop.config.settings import Settings
from multipane_shop.models.catalog import Catalog, default_catalog
from multipane_shop.models.product import Product
from multipane_shop.services.navigation import NavigationController
from multipane_shop.services.presentation import (
    Orientation,
    Presentation,
    Screen,
    Strategy,
    orientation_from_size,
    present,
    select_strategy,
)
from multipane_shop.services.selection_state import SelectionState
from multipane_shop.ui.widgets import ProductDetails, ProductList

logger = logging.getLogger("multipane_shop.ui")

# Navigated screens map onto the ContentSwitcher children by widget id
_SCREEN_WIDGET_IDS: dict[Screen, str] = {
    Screen.LIST: "product_list",
    Screen.DETAIL: "product_details",
}


class ShoppingApp(App[None]):
    """Adaptive list/detail browser over a fixed product catalog.

    Landscape terminals get both panes side by side; anything else gets
    one screen at a time, with the visible screen derived from the
    selection.
    """

    CSS_PATH = "styles.tcss"
    TITLE = Settings.APP_TITLE

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("o", "rotate", "Rotate"),
        Binding("escape", "back", "Back"),
    ]

    def __init__(
        self,
        catalog: Catalog | None = None,
        orientation: Orientation | None = None,
        saved_state: dict[str, str | None] | None = None,
    ) -> None:
        super().__init__()
        self.catalog = catalog if catalog is not None else default_catalog()
        self.selection_state = SelectionState()
        if saved_state is not None:
            self.selection_state.restore(saved_state, self.catalog)
        self.navigation = NavigationController(self.selection_state)

        self._forced_orientation: Orientation | None = (
            orientation
            if orientation is not None
            else Settings.orientation_override()
        )
        self.orientation: Orientation = (
            self._forced_orientation or Orientation.UNDEFINED
        )
        self.strategy: Strategy | None = None
        self._unsubscribe = self.selection_state.subscribe(
            self._on_selection_changed
        )

    @property
    def presentation(self) -> Presentation:
        return present(self.orientation, self.selection_state.current())

    def compose(self) -> ComposeResult:
        """Build the static frame; the body is filled per strategy."""
        yield Header()
        yield Container(id="body")
        yield Footer()

    async def on_mount(self) -> None:
        orientation = self._forced_orientation or orientation_from_size(
            self.size.width, self.size.height, Settings.CELL_ASPECT_RATIO
        )
        self.orientation = orientation
        self.strategy = select_strategy(orientation)
        await self._rebuild_layout()

    async def on_resize(self, event: events.Resize) -> None:
        if self._forced_orientation is not None:
            return
        await self.apply_orientation(
            orientation_from_size(
                event.size.width,
                event.size.height,
                Settings.CELL_ASPECT_RATIO,
            )
        )

    async def on_unmount(self) -> None:
        self._unsubscribe()

    async def apply_orientation(self, orientation: Orientation) -> None:
        """React to a new orientation signal.

        The body is only rebuilt when the strategy changes; a rebuild
        re-derives the navigated start screen from the selection.
        """
        self.orientation = orientation
        strategy = select_strategy(orientation)
        if self.strategy is None:
            # Not mounted yet, on_mount builds the first layout
            return
        if strategy is self.strategy:
            self._update_subtitle()
            return

        logger.info(
            "Orientation %s selects %s layout (was %s)",
            orientation.value,
            strategy.value,
            self.strategy.value,
        )
        self.strategy = strategy
        await self._rebuild_layout()

    async def _rebuild_layout(self) -> None:
        body = self.query_one("#body", Container)
        await body.remove_children()

        selected = self.selection_state.current()
        product_list = ProductList(self.catalog, selected, id="product_list")
        product_details = ProductDetails(selected, id="product_details")

        if self.strategy is Strategy.SPLIT:
            await body.mount(
                Horizontal(product_list, product_details, id="split_layout")
            )
        else:
            await body.mount(
                ContentSwitcher(
                    product_list,
                    product_details,
                    id="navigated_layout",
                    initial=_SCREEN_WIDGET_IDS[self.navigation.screen],
                )
            )

        self._update_subtitle()
        self.call_after_refresh(self._focus_active_view)
        logger.debug(
            "Layout rebuilt: %s, selection=%s",
            self.presentation,
            selected.product_id if selected is not None else None,
        )

    def _on_selection_changed(self, selected: Product | None) -> None:
        """Push a selection change into every mounted view in one step."""
        for product_list in self.query(ProductList):
            product_list.mark_selected(selected)
        for product_details in self.query(ProductDetails):
            product_details.show_product(selected)

        if self.strategy is Strategy.NAVIGATED:
            switcher = self.query("#navigated_layout")
            if switcher:
                switcher.first(ContentSwitcher).current = _SCREEN_WIDGET_IDS[
                    self.navigation.screen
                ]
                self._focus_active_view()

    def _focus_active_view(self) -> None:
        # May run after a refresh, when the layout has been swapped again
        if self.presentation.screen is Screen.DETAIL:
            for product_details in self.query(ProductDetails):
                product_details.focus_back()
        else:
            for product_list in self.query(ProductList):
                product_list.focus_rows()

    def _update_subtitle(self) -> None:
        strategy = self.strategy.value if self.strategy is not None else "-"
        self.sub_title = f"{strategy} layout / {self.orientation.value}"

    # --- Events -------------------------------------------------------------

    def on_product_list_product_chosen(
        self, event: ProductList.ProductChosen
    ) -> None:
        self.select_product(event.product)

    def on_product_details_back_requested(
        self, event: ProductDetails.BackRequested
    ) -> None:
        self.action_back()

    # --- Actions ------------------------------------------------------------

    def select_product(self, product: Product) -> None:
        """Select *product* the way the active strategy expects."""
        if self.strategy is Strategy.NAVIGATED:
            self.navigation.open_product(product)
        else:
            self.selection_state.select(product)

    def action_back(self) -> None:
        """Clear the selection (pops the detail screen when navigating)."""
        if self.strategy is Strategy.NAVIGATED:
            self.navigation.back()
        else:
            self.selection_state.clear()

    async def action_rotate(self) -> None:
        """Flip between landscape and portrait, ignoring the terminal size."""
        rotated = (
            Orientation.PORTRAIT
            if self.orientation is Orientation.LANDSCAPE
            else Orientation.LANDSCAPE
        )
        self._forced_orientation = rotated
        await self.apply_orientation(rotated)
        self.notify(f"Rotated to {rotated.value}")

    def save_state(self) -> dict[str, str | None]:
        """Bundle needed to recreate this session's selection."""
        return self.selection_state.snapshot()
