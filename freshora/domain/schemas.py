# freshora/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelIn(BaseModel):
    """Request body: camelCase on the wire, whitespace stripped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class CamelOut(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(CamelOut, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None


# ---------------------------------------------------------------- catalog


class ServiceCreate(CamelIn):
    slug: str = Field(..., min_length=1, max_length=120)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    full_description: Optional[str] = None
    rating: Optional[int] = Field(None, ge=0, le=5)
    reviews: Optional[int] = Field(None, ge=0)
    duration: Optional[str] = None
    image: Optional[str] = None


class ServiceItemCreate(CamelIn):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0, description="Price must be a positive number")
    description: Optional[str] = None
    unit: Optional[str] = None
    image: Optional[str] = None


class ItemCreate(ServiceItemCreate):
    service_id: int = Field(..., gt=0)


class BulkItemsCreate(CamelIn):
    service_id: int = Field(..., gt=0)
    items: List[ServiceItemCreate] = Field(..., min_length=1)


class ServiceItemOut(CamelOut):
    id: str
    name: str
    price: float
    description: str = ""
    unit: str = "Per Item"


class ItemOut(CamelOut):
    id: str
    service_id: int
    category: str
    name: str
    price: float
    unit: str
    description: Optional[str] = None
    image: Optional[str] = None


class ServiceOut(CamelOut):
    id: int
    slug: str
    title: str
    description: str
    full_description: Optional[str] = None
    rating: Optional[int] = None
    reviews: Optional[int] = None
    duration: Optional[str] = None
    image: Optional[str] = None
    items: Dict[str, List[ServiceItemOut]] = {}
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ------------------------------------------------------------------- cart


class CartItemIn(CamelIn):
    id: str = Field(..., min_length=1, description="Item ID is required")
    name: str = Field(..., min_length=1, description="Item name is required")
    price: Decimal = Field(..., ge=0, description="Item price must be a number")
    category: Optional[str] = None
    quantity: int = Field(1, ge=1, description="Quantity must be >= 1")


class AddToCartIn(CamelIn):
    item: CartItemIn
    session_id: Optional[str] = None


class UpdateCartItemIn(CamelIn):
    quantity: int = Field(..., ge=1, description="Quantity must be a positive integer")
    session_id: Optional[str] = None


class CartLineOut(CamelOut):
    id: str
    service_item_id: str
    name: str
    category: str
    service_type: str
    price: float
    quantity: int


class CartOut(CamelOut):
    session_id: str
    items: List[CartLineOut]
    total_items: int
    total_price: float


# ----------------------------------------------------------------- orders


class CustomerInfo(CamelIn):
    name: str = Field(..., min_length=1, description="Customer name is required")
    email: EmailStr
    phone: str = Field(..., min_length=1, description="Customer phone is required")
    address: Optional[str] = None


class OrderItemIn(CamelIn):
    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "serviceItemId", "service_item_id"),
    )
    quantity: int = Field(1, ge=1)
    # informational only, catalog values win
    name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Decimal] = None


class OrderCreate(CamelIn):
    items: List[OrderItemIn] = Field(..., min_length=1, description="At least one item is required")
    customer_info: CustomerInfo
    pickup_date: Optional[datetime] = None
    delivery_date: Optional[datetime] = None
    special_instructions: Optional[str] = None
    notes: Optional[str] = None
    total_amount: Optional[Decimal] = None


class OrderStatusUpdate(CamelIn):
    status: str = Field(..., min_length=1)
    pickup_date: Optional[datetime] = None
    delivery_date: Optional[datetime] = None


class OrderItemOut(CamelOut):
    id: int
    service_id: int
    service_item_id: str
    name: str
    category: str
    service_type: str
    quantity: int
    price: float
    total_price: float


class OrderOut(CamelOut):
    id: int
    order_id: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: Optional[str] = None
    total_amount: float
    status: str
    notes: Optional[str] = None
    special_instructions: Optional[str] = None
    pickup_date: Optional[datetime] = None
    delivery_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemOut]
    email_sent: Optional[bool] = None


class TrackingStepOut(CamelOut):
    status: str
    label: str
    completed: bool
    timestamp: Optional[datetime] = None


class TrackingCustomerOut(CamelOut):
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None


class TrackingDetailsOut(CamelOut):
    total_amount: float
    pickup_date: Optional[datetime] = None
    delivery_date: Optional[datetime] = None
    special_instructions: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class TrackingItemOut(CamelOut):
    name: str
    category: str
    service_type: str
    quantity: int
    price: float


class TrackingOut(CamelOut):
    id: int
    order_id: str
    current_status: str
    customer_info: TrackingCustomerOut
    order_details: TrackingDetailsOut
    items: List[TrackingItemOut]
    tracking_steps: List[TrackingStepOut]
