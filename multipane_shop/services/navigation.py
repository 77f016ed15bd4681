# multipane_shop/services/navigation.py

"""Two-screen list/detail navigation for the navigated layout."""

import logging

from multipane_shop.models.product import Product
from multipane_shop.services.presentation import Screen, screen_for
from multipane_shop.services.selection_state import SelectionState

logger = logging.getLogger("multipane_shop.navigation")


class NavigationController:
    """List/detail stack whose position is derived from the selection.

    There is no stored stack: the current screen is ``DETAIL`` exactly
    when a product is selected, so the two can never disagree. Opening a
    product and going back are therefore single selection mutations.
    """

    def __init__(self, selection: SelectionState) -> None:
        self.selection = selection

    @property
    def screen(self) -> Screen:
        return screen_for(self.selection.current())

    @property
    def back_stack(self) -> tuple[Screen, ...]:
        """Screens from the bottom of the stack to the visible one."""
        if self.screen is Screen.DETAIL:
            return (Screen.LIST, Screen.DETAIL)
        return (Screen.LIST,)

    def open_product(self, product: Product) -> None:
        """Move from the list to *product*'s detail screen."""
        previous = self.screen
        self.selection.select(product)
        logger.debug(
            "Navigated %s -> %s for '%s'",
            previous.value,
            self.screen.value,
            product.product_id,
        )

    def back(self) -> bool:
        """Pop the detail screen; returns False when already on the list."""
        if self.screen is Screen.LIST:
            return False
        self.selection.clear()
        logger.debug("Navigated detail -> list")
        return True
