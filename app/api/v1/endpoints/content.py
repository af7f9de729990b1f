from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi_pagination import Page, paginate

from app.controllers.catalog_store import CatalogStore
from app.core.dependencies import get_store
from app.schemas.catalog_schemas import PageCreateSchema, PageSchema, PageUpdateSchema
from app.schemas.settings_schemas import SiteSettingsSchema, SiteSettingsUpdateSchema

router = APIRouter()


@router.get("/pages", response_model=Page[PageSchema])
def list_pages(store: CatalogStore = Depends(get_store)):
    return paginate(store.pages.get_multi())


@router.get("/pages/by-slug/{slug}", response_model=PageSchema)
def get_page_by_slug(slug: str, store: CatalogStore = Depends(get_store)):
    page = store.get_page_by_slug(slug)
    if not page:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Page not found")
    return page


@router.get("/pages/{page_id}", response_model=PageSchema)
def get_page(page_id: str, store: CatalogStore = Depends(get_store)):
    page = store.pages.get(page_id)
    if not page:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Page not found")
    return page


@router.post("/pages", response_model=PageSchema, status_code=status.HTTP_201_CREATED)
def create_page(page_in: PageCreateSchema, store: CatalogStore = Depends(get_store)):
    return store.pages.create(obj_in=page_in)


@router.patch("/pages/{page_id}", response_model=PageSchema)
def update_page(
    page_id: str, page_in: PageUpdateSchema, store: CatalogStore = Depends(get_store)
):
    page = store.pages.update(page_id, obj_in=page_in)
    if not page:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Page not found")
    return page


@router.delete("/pages/{page_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_page(page_id: str, store: CatalogStore = Depends(get_store)):
    store.pages.remove(page_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/settings", response_model=SiteSettingsSchema)
def get_settings(store: CatalogStore = Depends(get_store)):
    return store.get_settings()


@router.patch("/settings", response_model=SiteSettingsSchema)
def update_settings(
    settings_in: SiteSettingsUpdateSchema, store: CatalogStore = Depends(get_store)
):
    return store.update_settings(settings_in)
