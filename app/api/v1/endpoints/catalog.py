from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi_pagination import Page, paginate

from app.controllers.catalog_store import CatalogStore
from app.core.dependencies import get_store
from app.schemas.catalog_schemas import (
    CategoryCreateSchema,
    CategorySchema,
    CategoryUpdateSchema,
    ProductCreateSchema,
    ProductSchema,
    ProductUpdateSchema,
)

router = APIRouter()


@router.get("/products", response_model=Page[ProductSchema])
def list_products(store: CatalogStore = Depends(get_store)):
    return paginate(store.products.get_multi())


@router.get("/products/by-slug/{slug}", response_model=ProductSchema)
def get_product_by_slug(slug: str, store: CatalogStore = Depends(get_store)):
    product = store.get_product_by_slug(slug)
    if not product:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.get("/products/{product_id}", response_model=ProductSchema)
def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
    product = store.products.get(product_id)
    if not product:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post(
    "/products", response_model=ProductSchema, status_code=status.HTTP_201_CREATED
)
def create_product(
    product_in: ProductCreateSchema, store: CatalogStore = Depends(get_store)
):
    return store.products.create(obj_in=product_in)


@router.patch("/products/{product_id}", response_model=ProductSchema)
def update_product(
    product_id: str,
    product_in: ProductUpdateSchema,
    store: CatalogStore = Depends(get_store),
):
    product = store.products.update(product_id, obj_in=product_in)
    if not product:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: str, store: CatalogStore = Depends(get_store)):
    store.products.remove(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/categories", response_model=Page[CategorySchema])
def list_categories(store: CatalogStore = Depends(get_store)):
    return paginate(store.categories.get_multi())


@router.get("/categories/by-slug/{slug}", response_model=CategorySchema)
def get_category_by_slug(slug: str, store: CatalogStore = Depends(get_store)):
    category = store.get_category_by_slug(slug)
    if not category:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.get("/categories/{category_id}", response_model=CategorySchema)
def get_category(category_id: str, store: CatalogStore = Depends(get_store)):
    category = store.categories.get(category_id)
    if not category:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.post(
    "/categories", response_model=CategorySchema, status_code=status.HTTP_201_CREATED
)
def create_category(
    category_in: CategoryCreateSchema, store: CatalogStore = Depends(get_store)
):
    return store.categories.create(obj_in=category_in)


@router.patch("/categories/{category_id}", response_model=CategorySchema)
def update_category(
    category_id: str,
    category_in: CategoryUpdateSchema,
    store: CatalogStore = Depends(get_store),
):
    category = store.categories.update(category_id, obj_in=category_in)
    if not category:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: str, store: CatalogStore = Depends(get_store)):
    store.remove_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
