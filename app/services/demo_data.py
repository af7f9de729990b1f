# app/services/demo_data.py

import logging
from decimal import Decimal

from app.controllers.catalog_store import CatalogStore
from app.schemas.catalog_schemas import (
    CategoryCreateSchema,
    PageCreateSchema,
    ProductCreateSchema,
    ProductMediaSchema,
)

log = logging.getLogger(__name__)


def seed_demo_catalog(store: CatalogStore) -> bool:
    """
    Fills an empty store with two categories, two products and an about
    page. Returns False and leaves the store alone if it has any data.
    """
    if not store.is_empty():
        return False

    apparel = store.categories.create(
        obj_in=CategoryCreateSchema(
            name="Apparel", description="Clothing for everyday wear"
        )
    )
    accessories = store.categories.create(
        obj_in=CategoryCreateSchema(name="Accessories")
    )

    store.products.create(
        obj_in=ProductCreateSchema(
            name="Organic Cotton T-Shirt",
            description="Soft and sustainable t-shirt made from 100% organic cotton.",
            price=Decimal("29.99"),
            currency="USD",
            media=[
                ProductMediaSchema(
                    id="hero",
                    url="https://images.unsplash.com/photo-1521572267360-ee0c2909d518?auto=format&fit=crop&w=1200&q=80",
                    alt_text="Model wearing a white cotton t-shirt",
                )
            ],
            additional_info={
                "Fabric": "100% organic cotton",
                "Fit": "Relaxed fit",
                "Care": "Machine wash cold",
            },
            category_ids=[apparel.id],
        )
    )
    store.products.create(
        obj_in=ProductCreateSchema(
            name="Leather Weekender Bag",
            description="Handcrafted leather weekender bag with brass hardware.",
            price=Decimal("249.99"),
            currency="USD",
            media=[
                ProductMediaSchema(
                    id="hero",
                    url="https://images.unsplash.com/photo-1514996937319-344454492b37?auto=format&fit=crop&w=1200&q=80",
                    alt_text="Leather travel bag on a bench",
                )
            ],
            additional_info={
                "Material": "Full-grain leather",
                "Warranty": "Lifetime craftsmanship guarantee",
            },
            category_ids=[accessories.id],
        )
    )

    store.pages.create(
        obj_in=PageCreateSchema(
            title="About Our Craft",
            content=(
                "<h2>Handmade with care</h2><p>Each product is crafted by "
                "artisans using sustainable materials.</p>"
            ),
            template="custom-page.njk",
        )
    )
    log.info("Demo catalog seeded")
    return True
