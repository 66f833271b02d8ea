from pydantic import BaseModel, Field
from decimal import Decimal
from typing import List, Optional, Literal


OrderStatus = Literal["pending", "paid", "processing", "shipped", "delivered", "cancelled"]


class CheckoutIn(BaseModel):
    shippingName: Optional[str] = None
    shippingEmail: Optional[str] = None
    shippingPhone: Optional[str] = None
    shippingAddress: Optional[str] = None
    shippingCity: Optional[str] = None
    shippingState: Optional[str] = None
    shippingPincode: Optional[str] = None


class CheckoutOut(BaseModel):
    orderId: int
    razorpayOrderId: str
    amount: int  # smallest currency unit (paise)
    currency: str
    keyId: Optional[str] = None


class PaymentVerifyIn(BaseModel):
    razorpay_order_id: str = Field(min_length=1)
    razorpay_payment_id: str = Field(min_length=1)
    razorpay_signature: str = Field(min_length=1)
    orderId: int


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemOut(BaseModel):
    id: int
    productId: int
    productName: str
    productImage: Optional[str] = None
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    price: Decimal


class ShippingOut(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None


class OrderUserOut(BaseModel):
    id: int
    email: str
    name: Optional[str] = None


class OrderOut(BaseModel):
    id: int
    userId: int
    status: OrderStatus
    totalAmount: Decimal
    shipping: ShippingOut
    razorpayOrderId: Optional[str] = None
    razorpayPaymentId: Optional[str] = None
    paidAt: Optional[str] = None
    items: List[OrderItemOut]
    createdAt: str
    updatedAt: str


class AdminOrderOut(OrderOut):
    user: Optional[OrderUserOut] = None
