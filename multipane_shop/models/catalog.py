# multipane_shop/models/catalog.py

"""Fixed, ordered product catalog."""

import logging
from collections.abc import Iterable, Iterator
from typing import overload

from multipane_shop.models.product import Product

logger = logging.getLogger("multipane_shop.catalog")


class CatalogError(Exception):
    """Raised when a catalog cannot be built from the given products."""


class Catalog:
    """Read-only, ordered sequence of products keyed by ``product_id``."""

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[str, Product] = {}
        for product in self._products:
            if product.product_id in self._by_id:
                raise CatalogError(
                    f"Duplicate product id '{product.product_id}'"
                )
            self._by_id[product.product_id] = product
        logger.debug("Catalog built with %d products", len(self._products))

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    @overload
    def __getitem__(self, index: int) -> Product: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Product, ...]: ...

    def __getitem__(
        self, index: int | slice
    ) -> Product | tuple[Product, ...]:
        return self._products[index]

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Product):
            return False
        return self._by_id.get(item.product_id) == item

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def get(self, product_id: str) -> Product | None:
        """Look up a product by its identifier."""
        return self._by_id.get(product_id)

    def find_by_name(self, name: str) -> Product | None:
        """Return the first product whose name matches, ignoring case."""
        wanted = name.strip().casefold()
        for product in self._products:
            if product.name.casefold() == wanted:
                return product
        return None


def default_catalog() -> Catalog:
    """Build the built-in three-item milk catalog."""
    return Catalog(
        [
            Product(
                product_id="whole-milk",
                name="Whole Milk",
                price="$5",
                description="This milk is decent.",
            ),
            Product(
                product_id="fat-free-lactaid",
                name="Fat Free Lactaid",
                price="$5.50",
                description="This milk is the best.",
            ),
            Product(
                product_id="fat-free-fairlife",
                name="Fat Free Fairlife",
                price="$6",
                description="This milk is pretty good.",
            ),
        ]
    )
