# multipane_shop/services/selection_state.py

"""Holds the single product currently chosen for detail viewing."""

import logging
from collections.abc import Callable

from multipane_shop.models.catalog import Catalog
from multipane_shop.models.product import Product

logger = logging.getLogger("multipane_shop.selection")

SelectionListener = Callable[[Product | None], None]


def is_selected(product: Product, selected: Product | None) -> bool:
    """Return True when *product* is the current selection (by identifier)."""
    return selected is not None and product.product_id == selected.product_id


class SelectionState:
    """At most one selected product, with change notification.

    ``select`` trusts its caller: the product is expected to come from the
    catalog being rendered. Only bundles handed to :meth:`restore` are
    checked against a catalog, since they originate outside the running UI.
    """

    def __init__(self) -> None:
        self._current: Product | None = None
        self._listeners: list[SelectionListener] = []

    def current(self) -> Product | None:
        return self._current

    def select(self, product: Product) -> None:
        """Make *product* the selection and notify listeners on change."""
        if self._current == product:
            logger.debug("Re-selected '%s', nothing to do", product.product_id)
            return
        self._current = product
        logger.info("Selected product '%s'", product.product_id)
        self._notify()

    def clear(self) -> None:
        """Drop the selection; a no-op when nothing is selected."""
        if self._current is None:
            return
        logger.info("Cleared selection of '%s'", self._current.product_id)
        self._current = None
        self._notify()

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """Register *listener* and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> dict[str, str | None]:
        """Return a bundle that :meth:`restore` can rebuild the state from."""
        return {
            "product_id": (
                self._current.product_id if self._current is not None else None
            )
        }

    def restore(
        self, bundle: dict[str, str | None], catalog: Catalog
    ) -> Product | None:
        """Re-establish the selection saved in *bundle*.

        Ids that are not in *catalog* are dropped so the selection never
        points outside the catalog being shown.
        """
        product_id = bundle.get("product_id")
        if product_id is None:
            self.clear()
            return None

        product = catalog.get(product_id)
        if product is None:
            logger.warning(
                "Saved selection '%s' is not in the catalog, ignoring it",
                product_id,
            )
            self.clear()
            return None

        self.select(product)
        return product

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._current)
