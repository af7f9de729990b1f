from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ProductMediaSchema(BaseModel):
    id: str
    url: str
    alt_text: str = ""


class ProductSchema(BaseModel):
    id: str
    slug: str
    name: str
    description: str = ""
    price: Decimal = Field(..., ge=0)
    currency: str
    media: List[ProductMediaSchema] = []
    additional_info: Dict[str, str] = {}
    category_ids: List[str] = []
    custom_template: Optional[str] = None


class ProductCreateSchema(BaseModel):
    name: str
    slug: Optional[str] = None
    description: str = ""
    price: Decimal = Field(..., ge=0)
    currency: str
    media: List[ProductMediaSchema] = []
    additional_info: Dict[str, str] = {}
    category_ids: List[str] = []
    custom_template: Optional[str] = None


class ProductUpdateSchema(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = None
    media: Optional[List[ProductMediaSchema]] = None
    additional_info: Optional[Dict[str, str]] = None
    category_ids: Optional[List[str]] = None
    custom_template: Optional[str] = None


class CategorySchema(BaseModel):
    id: str
    slug: str
    name: str
    description: Optional[str] = None
    parent_id: Optional[str] = None


class CategoryCreateSchema(BaseModel):
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[str] = None


class CategoryUpdateSchema(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[str] = None


class PageSchema(BaseModel):
    id: str
    slug: str
    title: str
    content: str = ""
    template: str = "custom-page.njk"


class PageCreateSchema(BaseModel):
    title: str
    slug: Optional[str] = None
    content: str = ""
    template: str = "custom-page.njk"


class PageUpdateSchema(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    template: Optional[str] = None
