# app/controllers/catalog_store.py

import datetime
import logging
import threading
from typing import Optional

from app.controllers.catalog import (
    CategoryController,
    PageController,
    ProductController,
)
from app.schemas.catalog_schemas import CategorySchema, PageSchema, ProductSchema
from app.schemas.settings_schemas import (
    PaymentGatewayConfigSchema,
    SiteSettingsSchema,
    SiteSettingsUpdateSchema,
)

log = logging.getLogger(__name__)


def default_site_settings(store_name: str = "My Storefront") -> SiteSettingsSchema:
    year = datetime.datetime.now(datetime.timezone.utc).year
    return SiteSettingsSchema(
        header_html=f'<h1 class="site-title">{store_name}</h1>',
        footer_html=f"<p>© {year} {store_name}</p>",
        payment_gateways=[
            PaymentGatewayConfigSchema(
                provider="stripe",
                enabled=False,
                metadata={
                    "instructions": "Configure Stripe keys in the payment settings."
                },
            )
        ],
    )


class CatalogStore:
    """
    Owns the product, category and page controllers plus the site settings.

    One instance lives as long as the process that built it. Every
    controller shares the store's lock, so the category cascade and all
    other reads and writes are serialized.
    """

    def __init__(
        self,
        *,
        settings: Optional[SiteSettingsSchema] = None,
        store_name: str = "My Storefront",
    ):
        self._lock = threading.RLock()
        self.categories = CategoryController(CategorySchema, lock=self._lock)
        self.products = ProductController(
            ProductSchema, lock=self._lock, category_exists=self.categories.exists
        )
        self.pages = PageController(PageSchema, lock=self._lock)
        self.categories.add_remove_listener(self.products.detach_category)
        self._settings = settings or default_site_settings(store_name)

    def is_empty(self) -> bool:
        with self._lock:
            return not (
                self.categories.count() or self.products.count() or self.pages.count()
            )

    def get_product_by_slug(self, slug: str) -> Optional[ProductSchema]:
        return self.products.get_by_slug(slug)

    def get_category_by_slug(self, slug: str) -> Optional[CategorySchema]:
        return self.categories.get_by_slug(slug)

    def get_page_by_slug(self, slug: str) -> Optional[PageSchema]:
        return self.pages.get_by_slug(slug)

    def remove_category(self, category_id: str) -> None:
        """
        Removes a category and strips its id from every product. Child
        categories keep their parent_id.
        """
        self.categories.remove(category_id)

    def get_settings(self) -> SiteSettingsSchema:
        with self._lock:
            return self._settings.model_copy(deep=True)

    def update_settings(self, settings_in: SiteSettingsUpdateSchema) -> SiteSettingsSchema:
        """
        Merges top-level fields. A supplied payment_gateways list replaces
        the stored one entirely.
        """
        update_data = {
            key: value
            for key, value in settings_in.model_dump(exclude_unset=True).items()
            if value is not None
        }
        with self._lock:
            merged = self._settings.model_dump()
            merged.update(update_data)
            self._settings = SiteSettingsSchema.model_validate(merged)
            log.info("Site settings updated: %s", sorted(update_data))
            return self._settings.model_copy(deep=True)
