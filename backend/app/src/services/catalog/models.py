"""Pydantic models describing catalog pages and their products."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import to_decimal


class Variant(BaseModel):
    """One orderable configuration of a product."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str
    requires_shipping: bool
    taxable: bool
    available: bool
    price: Decimal = Field(ge=0)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> Any:
        converted = to_decimal(value)
        return value if converted is None else converted

    @property
    def purchasable(self) -> bool:
        # Shipping-required and available, kept as the store defines it.
        return self.requires_shipping and self.available


class Product(BaseModel):
    """Catalog entry grouping its variants."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str
    category: str = Field(alias="product_type")
    variants: Tuple[Variant, ...] = ()


class Page(BaseModel):
    """Products decoded from a single ``products.json?page=<n>`` response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    products: Tuple[Product, ...]

    @property
    def is_empty(self) -> bool:
        return not self.products


class CatalogError(RuntimeError):
    """Raised when the catalog sweep cannot be completed."""

    def __init__(self, page: int, url: str, message: str) -> None:
        super().__init__(message)
        self.page = page
        self.url = url
        self.message = message


class CatalogFetchError(CatalogError):
    """Transport failure while requesting a catalog page."""


class CatalogDecodeError(CatalogError):
    """Catalog page body was not the expected JSON document."""

    def __init__(
        self, page: int, url: str, message: str, body: Optional[str] = None
    ) -> None:
        super().__init__(page, url, message)
        self.body = body
