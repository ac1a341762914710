"""
Order Domain Models

Pydantic models for the daily menu and the order lifecycle.
Attributes are snake_case in Python and camelCase on the wire
(customerName, itemName, imageReference).

OrderDraft and OrderPatch double as the request models for order
creation and update: every field rule lives on these models.

Author: Khalil Bannouri
Version: 1.0.0
"""

import enum
from typing import Annotated, Any, Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class OrderStatus(str, enum.Enum):
    """Order delivery status. Any value may be written over any other."""
    RECEIVED = "RECEIVED"
    DELIVERING = "DELIVERING"
    DELIVERED = "DELIVERED"
    CANCELED = "CANCELED"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys. Strings are trimmed."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


CustomerName = Annotated[str, Field(min_length=1, examples=["Mike Johnson"])]


class MenuEntry(CamelModel):
    """A dish on the daily menu. The name doubles as its reference key."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, examples=["Margherita Pizza"])
    description: str = Field(default="", examples=["Classic pizza with fresh tomatoes"])
    image_reference: str = Field(default="", examples=["assets/margherita.png"])


class OrderItem(CamelModel):
    """Single line of an order."""
    item_name: str = Field(..., min_length=1, examples=["Quattro Stagioni"])
    quantity: int = Field(..., gt=0, strict=True, examples=[3])

    @field_validator("quantity", mode="before")
    @classmethod
    def accept_integral_float(cls, v: Any) -> Any:
        """JSON clients may send 2.0 for 2; strict int rejects everything else."""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


OrderContents = Annotated[List[OrderItem], Field(min_length=1)]


class OrderDraft(CamelModel):
    """Validated data for a new order: no id and no status."""
    customer_name: CustomerName
    contents: OrderContents


class OrderPatch(CamelModel):
    """
    Partial set of order fields for an update.

    Only fields in ``model_fields_set`` are applied. A field sent as
    null is present and rejected. ``contents`` replaces the whole
    sequence.
    """
    customer_name: Optional[CustomerName] = None
    status: Optional[OrderStatus] = None
    contents: Optional[OrderContents] = None

    @field_validator("customer_name", "status", "contents")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v


class Order(CamelModel):
    """A stored order."""
    id: str = Field(..., examples=["order-001"])
    customer_name: CustomerName
    status: OrderStatus = OrderStatus.RECEIVED
    contents: OrderContents
