"""Lookup tables for sellers and products.

Both indexes are built in one pass over their input sequence. A later
record with an already-seen key replaces the earlier one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..common.models import Product, Seller
from .models import SellerAccumulator

logger = logging.getLogger(__name__)


def build_seller_index(sellers: Iterable[Seller]) -> dict[str, SellerAccumulator]:
    """Map seller id to a freshly zeroed accumulator."""
    index: dict[str, SellerAccumulator] = {}
    for seller in sellers:
        if seller.id in index:
            logger.debug("Duplicate seller id %s, keeping the later record", seller.id)
        index[seller.id] = SellerAccumulator.from_seller(seller)
    return index


def build_product_index(products: Iterable[Product]) -> dict[str, Product]:
    """Map SKU to its catalog product."""
    index: dict[str, Product] = {}
    for product in products:
        if product.sku in index:
            logger.debug("Duplicate SKU %s, keeping the later record", product.sku)
        index[product.sku] = product
    return index


def lookup_seller(
    index: dict[str, SellerAccumulator], seller_id: str
) -> SellerAccumulator | None:
    return index.get(seller_id)


def lookup_product(index: dict[str, Product], sku: str) -> Product | None:
    return index.get(sku)
