# app/core/dependencies.py

from typing import List
from urllib.parse import quote, unquote

from fastapi import Depends, Request, Response

from app.controllers.catalog_store import CatalogStore
from app.core.config import settings
from app.schemas.cart_schema import CartItemSchema
from app.services.cart.cart_service import CartService
from app.services.cart.codec import CartCodec


def get_store(request: Request) -> CatalogStore:
    """
    The store built by the application factory.
    """
    return request.app.state.store


def get_cart_codec(request: Request) -> CartCodec:
    return request.app.state.cart_codec


def get_cart_service(store: CatalogStore = Depends(get_store)) -> CartService:
    return CartService(store)


def get_cart_items(
    request: Request, codec: CartCodec = Depends(get_cart_codec)
) -> List[CartItemSchema]:
    """
    Decodes the cart cookie. FastAPI caches dependencies per request, so
    this runs once no matter how many endpoints' dependencies ask for it.
    """
    raw = request.cookies.get(settings.CART_COOKIE_NAME)
    if raw:
        raw = unquote(raw)
    return codec.decode(raw)


def write_cart_cookie(
    response: Response, codec: CartCodec, items: List[CartItemSchema]
) -> None:
    response.set_cookie(
        settings.CART_COOKIE_NAME,
        quote(codec.encode(items), safe=""),
        max_age=settings.CART_COOKIE_MAX_AGE,
        httponly=True,
        samesite="lax",
    )
