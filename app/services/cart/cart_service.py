# app/services/cart/cart_service.py

import logging
import math
import re
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from app.controllers.catalog_store import CatalogStore
from app.schemas.cart_schema import CartItemSchema, CartLineSchema, PricedCartSchema

log = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_quantity(value: Any) -> int:
    """
    Reads a requested quantity the lenient way a form post is read: "3",
    3, 3.7 and "3 pcs" all give 3. Anything unusable or below 1 gives 1.
    """
    quantity = 0
    if isinstance(value, bool):
        quantity = 0
    elif isinstance(value, int):
        quantity = value
    elif isinstance(value, float) and math.isfinite(value):
        quantity = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            quantity = int(match.group(1))
    return max(1, quantity)


class CartService:
    """
    Cart operations against live catalog data.

    Carts are plain lists of CartItemSchema owned by the caller; every
    method returns a new list and leaves its input untouched.
    """

    def __init__(self, store: CatalogStore):
        self._store = store

    def add_item(
        self, items: Iterable[CartItemSchema], product_id: str, quantity: Any = 1
    ) -> Optional[List[CartItemSchema]]:
        """
        Adds a product or increases the quantity of its existing line.

        Returns None when the product does not exist; the caller decides
        what to show instead.
        """
        if not isinstance(product_id, str) or not self._store.products.exists(
            product_id
        ):
            log.debug("Rejected cart add for unknown product %r", product_id)
            return None

        quantity = normalize_quantity(quantity)
        updated = []
        merged = False
        for item in items:
            if item.product_id == product_id and not merged:
                item = item.model_copy(update={"quantity": item.quantity + quantity})
                merged = True
            else:
                item = item.model_copy()
            updated.append(item)
        if not merged:
            updated.append(CartItemSchema(product_id=product_id, quantity=quantity))
        return updated

    def update_item(
        self, items: Iterable[CartItemSchema], product_id: str, quantity: int
    ) -> List[CartItemSchema]:
        """
        Sets the quantity of a line. Zero or less removes it.
        """
        if quantity <= 0:
            return self.remove_item(items, product_id)
        return [
            item.model_copy(update={"quantity": quantity})
            if item.product_id == product_id
            else item.model_copy()
            for item in items
        ]

    @staticmethod
    def remove_item(
        items: Iterable[CartItemSchema], product_id: str
    ) -> List[CartItemSchema]:
        return [item.model_copy() for item in items if item.product_id != product_id]

    @staticmethod
    def count_items(items: Iterable[CartItemSchema]) -> int:
        return sum(item.quantity for item in items)

    def price_cart(self, items: Iterable[CartItemSchema]) -> PricedCartSchema:
        """
        Resolves every line against the catalog. Lines whose product is gone
        are left out, as are lines without a positive quantity. Currencies
        are not converted or checked, the total is a plain sum.
        """
        lines = []
        for item in items:
            if item.quantity <= 0:
                continue
            product = self._store.products.get(item.product_id)
            if product is None:
                continue
            lines.append(
                CartLineSchema(
                    product=product,
                    quantity=item.quantity,
                    line_total=product.price * item.quantity,
                )
            )

        currencies = {line.product.currency for line in lines}
        if len(currencies) > 1:
            log.warning("Cart mixes currencies %s", sorted(currencies))

        return PricedCartSchema(
            lines=lines,
            total=sum((line.line_total for line in lines), Decimal("0")),
            item_count=sum(line.quantity for line in lines),
            currency=currencies.pop() if len(currencies) == 1 else None,
        )
