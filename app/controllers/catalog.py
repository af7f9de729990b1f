# app/controllers/catalog.py

import threading
from typing import Any, Callable, Dict, Optional

from app.controllers.base import BaseController
from app.schemas.catalog_schemas import (
    CategoryCreateSchema,
    CategorySchema,
    CategoryUpdateSchema,
    PageCreateSchema,
    PageSchema,
    PageUpdateSchema,
    ProductCreateSchema,
    ProductSchema,
    ProductUpdateSchema,
)


class ProductController(
    BaseController[ProductSchema, ProductCreateSchema, ProductUpdateSchema]
):
    """
    Controller for products. Slugs come from the product name.
    """

    slug_source = "name"

    def __init__(
        self,
        model=ProductSchema,
        *,
        lock: Optional[threading.RLock] = None,
        category_exists: Optional[Callable[[str], bool]] = None,
    ):
        super().__init__(model, lock=lock)
        self._category_exists = category_exists

    def _prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        category_ids = data.get("category_ids")
        if category_ids is not None and self._category_exists is not None:
            seen = set()
            kept = []
            for category_id in category_ids:
                if category_id in seen or not self._category_exists(category_id):
                    continue
                seen.add(category_id)
                kept.append(category_id)
            data["category_ids"] = kept
        return data

    def detach_category(self, category_id: str) -> None:
        """
        Drops a category id from every product that references it.
        """
        with self._lock:
            for product_id, product in self._items.items():
                if category_id in product.category_ids:
                    self._items[product_id] = product.model_copy(
                        update={
                            "category_ids": [
                                c for c in product.category_ids if c != category_id
                            ]
                        }
                    )


class CategoryController(
    BaseController[CategorySchema, CategoryCreateSchema, CategoryUpdateSchema]
):
    """
    Controller for categories. Slugs come from the category name.
    """

    slug_source = "name"


class PageController(BaseController[PageSchema, PageCreateSchema, PageUpdateSchema]):
    """
    Controller for content pages. Slugs come from the page title.
    """

    slug_source = "title"
