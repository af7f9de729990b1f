import json
from decimal import Decimal

import click
from faker import Faker

from app.controllers.catalog_store import CatalogStore
from app.core.config import settings
from app.schemas.catalog_schemas import ProductCreateSchema, ProductMediaSchema
from app.services.cart.codec import cart_codec
from app.services.demo_data import seed_demo_catalog
from app.utils.slug import slugify as make_slug

fake = Faker()


def _dump_catalog(store: CatalogStore) -> str:
    catalog = {
        "categories": [c.model_dump(mode="json") for c in store.categories.get_multi()],
        "products": [p.model_dump(mode="json") for p in store.products.get_multi()],
        "pages": [p.model_dump(mode="json") for p in store.pages.get_multi()],
        "settings": store.get_settings().model_dump(mode="json"),
    }
    return json.dumps(catalog, indent=2, ensure_ascii=False)


@click.group()
def cli():
    """Storefront management script."""
    pass


@cli.command()
def populate_data():
    """Builds the demo catalog and prints it as JSON."""
    store = CatalogStore(store_name=settings.STORE_NAME)
    seed_demo_catalog(store)
    click.echo(_dump_catalog(store))


@cli.command()
@click.option("--count", default=1, help="Number of fake products to create.")
@click.option("--currency", default="USD", help="Currency code for the products.")
def populate_fake_data(count, currency):
    """Builds a catalog of fake products using Faker and prints it as JSON."""
    store = CatalogStore(store_name=settings.STORE_NAME)
    seed_demo_catalog(store)
    category_ids = [c.id for c in store.categories.get_multi()]
    for index in range(count):
        store.products.create(
            obj_in=ProductCreateSchema(
                name=fake.catch_phrase(),
                description=fake.paragraph(),
                price=Decimal(str(fake.pydecimal(left_digits=3, right_digits=2, positive=True))),
                currency=currency,
                media=[
                    ProductMediaSchema(
                        id=f"media-{index}",
                        url=fake.image_url(),
                        alt_text=fake.sentence(nb_words=4),
                    )
                ],
                additional_info={"Color": fake.color_name(), "SKU": fake.ean8()},
                category_ids=[fake.random_element(category_ids)],
            )
        )
    click.echo(_dump_catalog(store))
    click.echo(f"{count} fake products added successfully!", err=True)


@cli.command()
@click.argument("raw")
def decode_cart(raw):
    """Sanitizes a raw cart cookie value and prints what survives."""
    items = cart_codec.decode(raw)
    click.echo(cart_codec.encode(items))
    click.echo(f"{len(items)} valid cart lines.", err=True)


@cli.command()
@click.argument("text")
def slugify(text):
    """Prints the slug derived from TEXT."""
    click.echo(make_slug(text))


if __name__ == "__main__":
    cli()
