from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from datetime import datetime
from typing import List
import logging

from sanor.config import get_settings
from sanor.models.order import Order, OrderItem
from sanor.models.user import get_db
from sanor.routers.cart import get_cart_items, cart_subtotal, clear_cart_items
from sanor.schemas.order import (
    CheckoutIn,
    CheckoutOut,
    PaymentVerifyIn,
    OrderOut,
    OrderItemOut,
    OrderStatusUpdate,
    ShippingOut,
    AdminOrderOut,
    OrderUserOut,
)
from sanor.utils import payments
from sanor.utils.security import TokenUser, get_current_user, require_admin

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter()


def map_order_to_out(order: Order) -> OrderOut:
    shipping = ShippingOut(
        name=order.shipping_name,
        email=order.shipping_email,
        phone=order.shipping_phone,
        address=order.shipping_address,
        city=order.shipping_city,
        state=order.shipping_state,
        pincode=order.shipping_pincode,
    )
    items = [
        OrderItemOut(
            id=i.id,
            productId=i.product_id,
            productName=i.product_name,
            productImage=i.product_image,
            quantity=i.quantity,
            size=i.size,
            color=i.color,
            price=i.price,
        )
        for i in order.items
    ]
    return OrderOut(
        id=order.id,
        userId=order.user_id,
        status=order.status,  # type: ignore
        totalAmount=order.total_amount,
        shipping=shipping,
        razorpayOrderId=order.razorpay_order_id,
        razorpayPaymentId=order.razorpay_payment_id,
        paidAt=order.paid_at.isoformat() if order.paid_at else None,
        items=items,
        createdAt=order.created_at.isoformat(),
        updatedAt=order.updated_at.isoformat(),
    )


def map_admin_order_to_out(order: Order) -> AdminOrderOut:
    user = None
    if order.user is not None:
        user = OrderUserOut(id=order.user.id, email=order.user.email, name=order.user.name)
    return AdminOrderOut(**map_order_to_out(order).model_dump(), user=user)


# Checkout: snapshot the cart into a pending order and open a Razorpay order for it.
# Each step commits on its own; a provider failure leaves the pending order behind.
@router.post("/create-razorpay-order", response_model=CheckoutOut)
def create_razorpay_order(
    payload: CheckoutIn,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
):
    items = get_cart_items(db, current_user.id)
    if not items:
        raise HTTPException(status_code=400, detail="Cart is empty")
    if any(item.product is None for item in items):
        raise HTTPException(status_code=400, detail="Cart contains a product that is no longer available")

    total = cart_subtotal(items)

    order = Order(
        user_id=current_user.id,
        status="pending",
        total_amount=total,
        shipping_name=payload.shippingName,
        shipping_email=payload.shippingEmail,
        shipping_phone=payload.shippingPhone,
        shipping_address=payload.shippingAddress,
        shipping_city=payload.shippingCity,
        shipping_state=payload.shippingState,
        shipping_pincode=payload.shippingPincode,
    )
    db.add(order)
    db.commit()
    db.refresh(order)

    for item in items:
        db.add(
            OrderItem(
                order_id=order.id,
                product_id=item.product.id,
                product_name=item.product.name,
                product_image=item.product.image_url,
                quantity=item.quantity,
                size=item.size,
                color=item.color,
                price=item.product.price,
            )
        )
    db.commit()

    try:
        provider_order = payments.create_provider_order(total, receipt=f"order_{order.id}")
    except payments.PaymentGatewayNotConfigured as e:
        logger.error("Order %s left pending: %s", order.id, e)
        raise HTTPException(status_code=500, detail=str(e))
    except Exception:
        logger.exception("Razorpay order creation failed for order %s", order.id)
        raise HTTPException(status_code=500, detail="Failed to create payment order")

    order.razorpay_order_id = provider_order["id"]
    db.commit()

    return CheckoutOut(
        orderId=order.id,
        razorpayOrderId=provider_order["id"],
        amount=provider_order["amount"],
        currency=provider_order["currency"],
        keyId=get_settings().RAZORPAY_KEY_ID,
    )


# Payment callback: pending -> paid on a valid signature, then empty the whole cart.
# The current status is not checked: replaying a valid callback on a paid or
# cancelled order sets it to paid again and resets paid_at.
@router.post("/verify-payment")
def verify_payment(
    payload: PaymentVerifyIn,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
):
    order = db.query(Order).filter(Order.id == payload.orderId).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    if order.user_id != current_user.id:
        raise HTTPException(status_code=403, detail="Access denied")

    # The signed provider order must be the one opened for this order
    if not order.razorpay_order_id or order.razorpay_order_id != payload.razorpay_order_id:
        logger.warning("Provider order mismatch for order %s", order.id)
        raise HTTPException(status_code=400, detail="Invalid payment signature")

    if not payments.verify_payment_signature(
        payload.razorpay_order_id, payload.razorpay_payment_id, payload.razorpay_signature
    ):
        logger.warning("Invalid payment signature for order %s", order.id)
        raise HTTPException(status_code=400, detail="Invalid payment signature")

    now = datetime.utcnow()
    order.status = "paid"
    order.razorpay_payment_id = payload.razorpay_payment_id
    order.razorpay_signature = payload.razorpay_signature
    order.paid_at = now
    order.updated_at = now
    db.commit()

    # Every line goes, including items added while the payment was in flight
    clear_cart_items(db, current_user.id)
    db.commit()
    logger.info("Payment verified for order %s", order.id)
    return {"message": "Payment verified successfully", "orderId": order.id}


# Get User Orders
@router.get("", response_model=List[OrderOut])
def get_user_orders(db: Session = Depends(get_db), current_user: TokenUser = Depends(get_current_user)):
    orders = (
        db.query(Order)
        .filter(Order.user_id == current_user.id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )
    return [map_order_to_out(o) for o in orders]


# Get Order by ID (owner or admin)
@router.get("/{id}", response_model=OrderOut)
def get_order_by_id(id: int, db: Session = Depends(get_db), current_user: TokenUser = Depends(get_current_user)):
    order = db.query(Order).filter(Order.id == id).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    if order.user_id != current_user.id and not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Access denied")
    return map_order_to_out(order)


# Admin: All Orders
@admin_router.get("", response_model=List[AdminOrderOut])
def get_admin_orders(db: Session = Depends(get_db), current_user: TokenUser = Depends(require_admin)):
    orders = db.query(Order).order_by(Order.created_at.desc(), Order.id.desc()).all()
    return [map_admin_order_to_out(o) for o in orders]


# Admin: Update Order Status (any status may replace any other)
@admin_router.put("/{id}/status", response_model=OrderOut)
def admin_update_order_status(
    id: int,
    payload: OrderStatusUpdate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(require_admin),
):
    order = db.query(Order).filter(Order.id == id).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    previous = order.status
    order.status = payload.status
    order.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(order)
    logger.info("Order %s status %s -> %s by admin %s", order.id, previous, order.status, current_user.id)
    return map_order_to_out(order)
