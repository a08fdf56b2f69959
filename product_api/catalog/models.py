"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog items.

Product and Price are frozen: values handed out by the store cannot be
mutated by callers. ProductType keeps an explicit table between its
internal names and the labels used on the wire.

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ProductType(str, Enum):
    """Product category."""

    BOOKS = "BOOKS"
    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    HOME = "HOME"
    TOYS = "TOYS"
    GROCERY = "GROCERY"

    @property
    def label(self) -> str:
        """External label used when serializing."""
        return _LABELS[self]

    @classmethod
    def from_label(cls, value: str) -> "ProductType":
        """
        Resolve a category from its external label or internal name.

        Label matching is case-insensitive.

        Raises:
            ValueError: If nothing matches
        """
        key = value.strip().casefold()
        if key in _BY_LABEL:
            return _BY_LABEL[key]
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown product type: {value!r}") from None


_LABELS: Dict[ProductType, str] = {
    ProductType.BOOKS: "Book",
    ProductType.ELECTRONICS: "Electronics",
    ProductType.CLOTHING: "Clothing",
    ProductType.HOME: "Home and Garden",
    ProductType.TOYS: "Toys",
    ProductType.GROCERY: "Grocery",
}

_BY_LABEL: Dict[str, ProductType] = {
    label.casefold(): product_type for product_type, label in _LABELS.items()
}


class Price(BaseModel):
    """
    Price of a product.

    Attributes:
        value: Non-negative amount
        currency: Short currency code (e.g., "GBP")
    """

    model_config = ConfigDict(frozen=True)

    value: Decimal = Field(..., ge=0, description="Amount")
    currency: str = Field(..., min_length=1, description="Currency code")

    @field_serializer("value", when_used="json")
    def serialize_value(self, value: Decimal) -> float:
        return float(value)


class Product(BaseModel):
    """
    Product model for catalog items.

    Attributes:
        id: Caller-supplied unique identifier
        name: Display name
        description: Free text description
        price: Amount and currency
        type: Product category, serialized as its label (e.g., "Book")
        department: Owning department
        weight: Free-form weight with unit (e.g., "220g")
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: Price
    type: ProductType
    department: str = Field(..., description="Department")
    weight: str = Field(..., description="Weight with unit")

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, ProductType):
            return ProductType.from_label(value)
        return value

    @field_serializer("type")
    def serialize_type(self, value: ProductType) -> str:
        return value.label
