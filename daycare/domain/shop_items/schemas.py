"""Shop item schemas - Pydantic models for validation"""

from typing import Optional, Union

from pydantic import BaseModel, field_validator

from ...shared.validators import blank_to_none, price_to_minor_units, validate_required_text


class ShopItemCreate(BaseModel):
    """
    Schema for creating a shop item.

    ``price`` arrives as a decimal string from the form and is converted to
    integer minor units.
    """

    title: str
    description: Optional[str] = None
    price: Union[str, int, float]
    stock: Optional[int] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v):
        return validate_required_text(v, "Title")

    @field_validator("description")
    @classmethod
    def check_description(cls, v):
        return blank_to_none(v)

    @field_validator("price")
    @classmethod
    def check_price(cls, v):
        return price_to_minor_units(str(v))


class ShopItemUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[str, int, float]] = None
    stock: Optional[int] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v):
        if v is None:
            return v
        return validate_required_text(v, "Title")

    @field_validator("price")
    @classmethod
    def check_price(cls, v):
        if v is None:
            return v
        return price_to_minor_units(str(v))
