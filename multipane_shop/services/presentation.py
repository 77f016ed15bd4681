# multipane_shop/services/presentation.py

"""Pure layout decisions: which strategy and which screen to render.

Everything here is a function of two inputs, the orientation signal and
the current selection, so the layout can be reasoned about (and tested)
without a running terminal.
"""

from dataclasses import dataclass
from enum import Enum

from multipane_shop.models.product import Product

PLACEHOLDER_MESSAGE = "Select a product to view details."
PRICE_PREFIX = "Price: "


class Orientation(Enum):
    """Host-reported rotation state."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    UNDEFINED = "undefined"


class Strategy(Enum):
    """The two mutually exclusive ways of laying out list and detail."""

    SPLIT = "split"
    NAVIGATED = "navigated"


class Screen(Enum):
    """Screens of the navigated strategy's two-entry stack."""

    LIST = "list"
    DETAIL = "detail"


@dataclass(frozen=True)
class Presentation:
    """What to render for a given orientation and selection.

    ``screen`` is only meaningful under :attr:`Strategy.NAVIGATED` and is
    ``None`` for the split layout, where both views are always mounted.
    """

    strategy: Strategy
    screen: Screen | None
    selected: Product | None


def select_strategy(orientation: Orientation) -> Strategy:
    """Landscape gets the split layout, everything else navigates."""
    if orientation is Orientation.LANDSCAPE:
        return Strategy.SPLIT
    return Strategy.NAVIGATED


def screen_for(selected: Product | None) -> Screen:
    """Derive the navigated screen from whether anything is selected."""
    return Screen.LIST if selected is None else Screen.DETAIL


def present(orientation: Orientation, selected: Product | None) -> Presentation:
    strategy = select_strategy(orientation)
    screen = screen_for(selected) if strategy is Strategy.NAVIGATED else None
    return Presentation(strategy=strategy, screen=screen, selected=selected)


def orientation_from_size(
    width: int, height: int, cell_aspect: float = 2.0
) -> Orientation:
    """Classify a terminal of *width* x *height* cells.

    A cell is roughly ``cell_aspect`` times taller than it is wide, so
    the height is scaled before comparing.
    """
    if width <= 0 or height <= 0:
        return Orientation.UNDEFINED
    scaled_height = height * cell_aspect
    if width > scaled_height:
        return Orientation.LANDSCAPE
    if width < scaled_height:
        return Orientation.PORTRAIT
    return Orientation.UNDEFINED


def detail_lines(product: Product | None) -> tuple[str, ...]:
    """Text lines of the detail view, or the placeholder prompt."""
    if product is None:
        return (PLACEHOLDER_MESSAGE,)
    return (
        product.name,
        f"{PRICE_PREFIX}{product.price}",
        product.description,
    )
