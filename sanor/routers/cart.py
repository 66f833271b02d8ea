from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from sanor.config import get_settings
from sanor.models.cart import CartItem
from sanor.models.product import Product
from sanor.models.user import get_db
from sanor.routers.products import to_product_out
from sanor.schemas.cart import CartItemIn, CartItemUpdate, CartItemOut, CartOut
from sanor.utils.security import TokenUser, get_current_user


router = APIRouter()

CENTS = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def _same(column, value):
    # NULL never equals NULL in SQL, so an absent size/colour has to be matched with IS NULL
    return column.is_(None) if value is None else column == value


def get_cart_items(db: Session, user_id: int) -> List[CartItem]:
    return (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.id.asc())
        .all()
    )


def cart_subtotal(items: List[CartItem]) -> Decimal:
    """Sum of current product price x quantity; lines whose product is gone count as zero."""
    total = Decimal("0")
    for item in items:
        if item.product is not None:
            total += Decimal(item.product.price) * item.quantity
    return _money(total)


def cart_totals(items: List[CartItem]) -> dict:
    subtotal = cart_subtotal(items)
    tax = _money(subtotal * Decimal(get_settings().TAX_RATE))
    shipping = _money(Decimal("0"))
    return {"subtotal": subtotal, "tax": tax, "shipping": shipping, "total": _money(subtotal + tax + shipping)}


def clear_cart_items(db: Session, user_id: int) -> int:
    return db.query(CartItem).filter(CartItem.user_id == user_id).delete(synchronize_session=False)


def _serialize_item(item: CartItem) -> CartItemOut:
    return CartItemOut(
        id=item.id,
        productId=item.product_id,
        quantity=item.quantity,
        size=item.size,
        color=item.color,
        product=to_product_out(item.product) if item.product is not None else None,
    )


def _serialize_cart(items: List[CartItem]) -> CartOut:
    return CartOut(items=[_serialize_item(i) for i in items], **cart_totals(items))


# Get Cart
@router.get("", response_model=CartOut)
def get_cart(db: Session = Depends(get_db), current_user: TokenUser = Depends(get_current_user)):
    return _serialize_cart(get_cart_items(db, current_user.id))


# Add Cart Item (merges with an identical product/size/colour line)
@router.post("", response_model=CartItemOut)
def add_cart_item(
    payload: CartItemIn,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
):
    product = db.query(Product).filter(Product.id == payload.productId).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    quantity = payload.quantity or 1
    existing = (
        db.query(CartItem)
        .filter(
            CartItem.user_id == current_user.id,
            CartItem.product_id == payload.productId,
            _same(CartItem.size, payload.size),
            _same(CartItem.color, payload.color),
        )
        .first()
    )
    if existing:
        existing.quantity = existing.quantity + quantity
        existing.updated_at = datetime.utcnow()
        item = existing
    else:
        item = CartItem(
            user_id=current_user.id,
            product_id=payload.productId,
            quantity=quantity,
            size=payload.size,
            color=payload.color,
        )
        db.add(item)
    db.commit()
    db.refresh(item)
    return _serialize_item(item)


# Update Cart Item quantity (zero or below removes the line)
@router.put("/{id}")
def update_cart_item(
    id: int,
    payload: CartItemUpdate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
):
    item = db.query(CartItem).filter(CartItem.id == id, CartItem.user_id == current_user.id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Cart item not found")
    if payload.quantity <= 0:
        db.delete(item)
        db.commit()
        return {"message": "Item removed"}
    item.quantity = payload.quantity
    item.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(item)
    return _serialize_item(item)


# Remove Cart Item (ids owned by someone else simply match nothing)
@router.delete("/{id}")
def remove_cart_item(
    id: int,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(get_current_user),
):
    db.query(CartItem).filter(CartItem.id == id, CartItem.user_id == current_user.id).delete(
        synchronize_session=False
    )
    db.commit()
    return {"message": "Item removed from cart"}


# Clear Cart
@router.delete("")
def clear_cart(db: Session = Depends(get_db), current_user: TokenUser = Depends(get_current_user)):
    clear_cart_items(db, current_user.id)
    db.commit()
    return {"message": "Cart cleared"}
