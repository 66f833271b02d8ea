from sqlalchemy import Column, Integer, String, Text, Numeric, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from sanor.models.user import Base


ORDER_STATUSES = ("pending", "paid", "processing", "shipped", "delivered", "cancelled")
# Orders in these states never count towards revenue
UNREALISED_STATUSES = ("pending", "cancelled")


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(20), default="pending", nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)  # snapshot at checkout, never recomputed

    # shipping snapshot, independent of later profile edits
    shipping_name = Column(String(100))
    shipping_email = Column(String(255))
    shipping_phone = Column(String(20))
    shipping_address = Column(Text)
    shipping_city = Column(String(100))
    shipping_state = Column(String(100))
    shipping_pincode = Column(String(10))

    razorpay_order_id = Column(String(100))
    razorpay_payment_id = Column(String(100))
    razorpay_signature = Column(String(255))
    paid_at = Column(DateTime)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")
    user = relationship("User")


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    # product fields copied at order time
    product_name = Column(String(200), nullable=False)
    product_image = Column(String(500))
    quantity = Column(Integer, nullable=False)
    size = Column(String(20))
    color = Column(String(50))
    price = Column(Numeric(10, 2), nullable=False)  # unit price at time of order

    order = relationship("Order", back_populates="items")
