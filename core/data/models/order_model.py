"""SQLAlchemy ORM models for Order aggregate."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Naive UTC: the column is TIMESTAMP WITHOUT TIME ZONE on every backend
    return datetime.now(timezone.utc).replace(tzinfo=None)


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=_new_id)

    # Shipping
    shipping_address1 = Column(String(500), nullable=False)
    shipping_address2 = Column(String(500), nullable=True)
    city = Column(String(255), nullable=False)
    zip = Column(String(50), nullable=False)
    country = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)

    status = Column(String(50), nullable=False, default="Pending", index=True)
    total_price = Column(Numeric(12, 2), nullable=False, default=0)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    date_ordered = Column(DateTime, nullable=False, default=utcnow)

    # Relationships
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )
    user = relationship("UserModel")

    __table_args__ = (
        Index("ix_orders_date_ordered", "date_ordered"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, status={self.status}, total_price={self.total_price})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(String(36), primary_key=True, default=_new_id)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)

    # Price captured at creation time
    unit_price = Column(Numeric(12, 2), nullable=False)

    # Insertion order within the order
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    order = relationship("OrderModel", back_populates="items")
    product = relationship("ProductModel")

    def __repr__(self):
        return f"<OrderItemModel(id={self.id}, product_id={self.product_id}, quantity={self.quantity})>"
