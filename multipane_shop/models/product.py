# multipane_shop/models/product.py

"""Product data model shared by every view."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A single purchasable item in the catalog.

    ``price`` is already display-formatted (``"$5.50"``), it is never
    parsed. ``product_id`` is what selection tracking compares.
    """

    product_id: str
    name: str
    price: str
    description: str = ""
