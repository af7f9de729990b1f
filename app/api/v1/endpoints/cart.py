from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.core.dependencies import (
    get_cart_codec,
    get_cart_items,
    get_cart_service,
    write_cart_cookie,
)
from app.schemas.cart_schema import (
    CartAddRequestSchema,
    CartItemSchema,
    CartUpdateRequestSchema,
    PricedCartSchema,
)
from app.services.cart.cart_service import CartService
from app.services.cart.codec import CartCodec

router = APIRouter(prefix="/cart")


@router.get("", response_model=PricedCartSchema)
def get_cart(
    items: List[CartItemSchema] = Depends(get_cart_items),
    cart_service: CartService = Depends(get_cart_service),
):
    return cart_service.price_cart(items)


@router.post("/items", response_model=PricedCartSchema)
def add_cart_item(
    item_in: CartAddRequestSchema,
    response: Response,
    items: List[CartItemSchema] = Depends(get_cart_items),
    cart_service: CartService = Depends(get_cart_service),
    codec: CartCodec = Depends(get_cart_codec),
):
    updated = cart_service.add_item(items, item_in.product_id, item_in.quantity)
    if updated is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Product not found")
    write_cart_cookie(response, codec, updated)
    return cart_service.price_cart(updated)


@router.patch("/items/{product_id}", response_model=PricedCartSchema)
def update_cart_item(
    product_id: str,
    item_in: CartUpdateRequestSchema,
    response: Response,
    items: List[CartItemSchema] = Depends(get_cart_items),
    cart_service: CartService = Depends(get_cart_service),
    codec: CartCodec = Depends(get_cart_codec),
):
    updated = cart_service.update_item(items, product_id, item_in.quantity)
    write_cart_cookie(response, codec, updated)
    return cart_service.price_cart(updated)


@router.delete("/items/{product_id}", response_model=PricedCartSchema)
def remove_cart_item(
    product_id: str,
    response: Response,
    items: List[CartItemSchema] = Depends(get_cart_items),
    cart_service: CartService = Depends(get_cart_service),
    codec: CartCodec = Depends(get_cart_codec),
):
    updated = cart_service.remove_item(items, product_id)
    write_cart_cookie(response, codec, updated)
    return cart_service.price_cart(updated)


@router.delete("", response_model=PricedCartSchema)
def clear_cart(response: Response, codec: CartCodec = Depends(get_cart_codec)):
    write_cart_cookie(response, codec, [])
    return PricedCartSchema()
