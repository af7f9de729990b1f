# app/services/cart/codec.py

import json
import logging
import math
from typing import Any, Iterable, List, Optional

from app.core.config import settings
from app.schemas.cart_schema import CartItemSchema

log = logging.getLogger(__name__)


def _coerce_product_id(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _coerce_quantity(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        try:
            value = float(value.strip() or "0")
        except ValueError:
            return 0
    if isinstance(value, (int, float)) and math.isfinite(value):
        return int(value)
    return 0


class CartCodec:
    """
    Converts a cart to the JSON text kept by the client and back.

    The client value is untrusted: `decode` never raises, it drops whatever
    it cannot use and returns the rest.
    """

    def __init__(self, max_payload_size: Optional[int] = None):
        self.max_payload_size = max_payload_size

    def decode(self, raw: Optional[str]) -> List[CartItemSchema]:
        if not raw:
            return []
        if self.max_payload_size is not None and len(raw) > self.max_payload_size:
            log.warning("Cart payload of %d characters ignored", len(raw))
            return []

        try:
            parsed = json.loads(raw)
        except (TypeError, ValueError, RecursionError):
            log.debug("Cart payload is not JSON, starting an empty cart")
            return []
        if not isinstance(parsed, list):
            return []

        items = []
        for entry in parsed:
            if not isinstance(entry, dict):
                continue
            product_id = _coerce_product_id(entry.get("productId"))
            quantity = _coerce_quantity(entry.get("quantity"))
            if not product_id or quantity <= 0:
                continue
            items.append(CartItemSchema(product_id=product_id, quantity=quantity))

        if len(items) != len(parsed):
            log.debug("Dropped %d invalid cart entries", len(parsed) - len(items))
        return items

    def encode(self, items: Iterable[CartItemSchema]) -> str:
        sanitized = [
            item.model_dump(by_alias=True) for item in items if item.quantity > 0
        ]
        return json.dumps(sanitized, separators=(",", ":"))


# Instantiate the codec with the configured size limit
cart_codec = CartCodec(max_payload_size=settings.CART_MAX_PAYLOAD_SIZE)
