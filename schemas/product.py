"""
Product Pydantic schemas for API requests/responses
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_serializer, field_validator
from pydantic.alias_generators import to_camel

DATE_FORMAT = "%d-%m-%Y"  # dd-MM-yyyy on the wire

# Matches the Numeric(10, 2) column; kept as Decimal everywhere, only rendered as a JSON number
Price = Annotated[
    Decimal,
    Field(max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]

# 32-bit signed range, as stored by the INTEGER column on every backend
Quantity = Annotated[int, Field(ge=-2**31, le=2**31 - 1)]


class ProductBase(BaseModel):
    """Base product schema, camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    name: str | None = None
    description: str | None = None
    brand: str | None = None
    category: str | None = None
    price: Price | None = None
    release_date: date | None = None
    available: bool = False
    quantity: Quantity = 0

    @field_validator("release_date", mode="before")
    @classmethod
    def parse_release_date(cls, value):
        """Accept dd-MM-yyyy strings; anything else goes through pydantic as usual"""
        if isinstance(value, str):
            if not value.strip():
                return None
            try:
                return datetime.strptime(value.strip(), DATE_FORMAT).date()
            except ValueError:
                raise ValueError("releaseDate must use the dd-MM-yyyy format") from None
        return value

    @field_serializer("release_date", when_used="json")
    def format_release_date(self, value: date | None) -> str | None:
        return value.strftime(DATE_FORMAT) if value else None


class ProductCreate(ProductBase):
    """Schema for the `product` part of a create request"""
    pass


class ProductUpdate(ProductBase):
    """
    Schema for the `product` part of an update request.

    Every field replaces the stored value, including fields left out of the
    request, which take the defaults above.
    """
    pass


class ProductResponse(ProductBase):
    """Schema for product response"""
    model_config = ConfigDict(ser_json_bytes="base64")

    id: int
    image_name: str | None = None
    image_type: str | None = None
    image_data: bytes | None = None
