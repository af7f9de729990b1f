from decimal import Decimal

from app.controllers.catalog_store import CatalogStore
from app.schemas.catalog_schemas import (
    CategoryCreateSchema,
    PageCreateSchema,
    ProductCreateSchema,
)
from app.schemas.settings_schemas import (
    PaymentGatewayConfigSchema,
    SiteSettingsUpdateSchema,
)
from app.services.demo_data import seed_demo_catalog


def test_removing_category_detaches_it_from_products(store, category, product):
    other = store.categories.create(obj_in=CategoryCreateSchema(name="Sale"))
    second = store.products.create(
        obj_in=ProductCreateSchema(
            name="Socks",
            price=Decimal("5"),
            currency="USD",
            category_ids=[other.id, category.id],
        )
    )

    store.remove_category(category.id)

    assert store.categories.get(category.id) is None
    assert all(category.id not in p.category_ids for p in store.products.get_multi())
    assert store.products.get(product.id).category_ids == []
    assert store.products.get(second.id).category_ids == [other.id]


def test_removing_category_through_controller_also_cascades(store, category, product):
    store.categories.remove(category.id)
    assert store.products.get(product.id).category_ids == []


def test_removing_category_keeps_products_and_children(store, category, product):
    child = store.categories.create(
        obj_in=CategoryCreateSchema(name="Shirts", parent_id=category.id)
    )
    store.remove_category(category.id)

    assert store.products.get(product.id) is not None
    assert store.categories.get(child.id).parent_id == category.id


def test_slug_lookups(store, category, product):
    page = store.pages.create(obj_in=PageCreateSchema(title="About Our Craft"))

    assert store.get_page_by_slug("about-our-craft") == page
    assert store.get_product_by_slug("organic-cotton-t-shirt") == product
    assert store.get_category_by_slug("apparel") == category
    assert store.get_page_by_slug("nope") is None


def test_default_settings():
    settings = CatalogStore(store_name="Craft Shop").get_settings()
    assert settings.header_html == '<h1 class="site-title">Craft Shop</h1>'
    assert "Craft Shop" in settings.footer_html
    assert [g.provider for g in settings.payment_gateways] == ["stripe"]
    assert settings.payment_gateways[0].enabled is False


def test_update_settings_merges_top_level_fields(store):
    before = store.get_settings()
    updated = store.update_settings(SiteSettingsUpdateSchema(header_html="<h1>New</h1>"))

    assert updated.header_html == "<h1>New</h1>"
    assert updated.footer_html == before.footer_html
    assert updated.payment_gateways == before.payment_gateways


def test_update_settings_replaces_gateways_wholesale(store):
    updated = store.update_settings(
        SiteSettingsUpdateSchema(
            payment_gateways=[
                PaymentGatewayConfigSchema(provider="paypal", enabled=True, public_key="pk")
            ]
        )
    )
    assert [g.provider for g in updated.payment_gateways] == ["paypal"]
    assert store.get_settings().payment_gateways[0].public_key == "pk"


def test_settings_are_not_live_references(store):
    settings = store.get_settings()
    settings.header_html = "<h1>Hacked</h1>"
    settings.payment_gateways.clear()

    fresh = store.get_settings()
    assert fresh.header_html != "<h1>Hacked</h1>"
    assert len(fresh.payment_gateways) == 1


def test_seed_demo_catalog_only_fills_empty_store(store):
    assert store.is_empty()
    assert seed_demo_catalog(store) is True
    assert not store.is_empty()

    assert {c.slug for c in store.categories.get_multi()} == {"apparel", "accessories"}
    assert store.get_page_by_slug("about-our-craft") is not None
    shirt = store.get_product_by_slug("organic-cotton-t-shirt")
    assert shirt.price == Decimal("29.99")
    assert store.get_category_by_slug("apparel").id in shirt.category_ids

    assert seed_demo_catalog(store) is False
    assert store.products.count() == 2
