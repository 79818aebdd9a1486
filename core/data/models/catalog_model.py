"""SQLAlchemy ORM models for the records ordering reads but does not own.

Products, categories and users are maintained by the catalog and account
services; ordering only joins against them.
"""

import uuid

from sqlalchemy import Column, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class CategoryModel(Base):
    """SQLAlchemy ORM model for categories table."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    icon = Column(String(255), nullable=True)
    color = Column(String(32), nullable=True)


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(500), nullable=False)
    price = Column(Numeric(12, 2), nullable=False, default=0)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)

    category = relationship("CategoryModel")

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, price={self.price})>"


class UserModel(Base):
    """SQLAlchemy ORM model for users table (display name only matters here)."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True, unique=True)
