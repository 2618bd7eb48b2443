"""
Database Models - Store Back Office

Read models for the tables the inspection tools query. The schema itself
is owned by the back office server; these declarations mirror the columns
it exposes:

- Store: top-level tenant, addressed by a unique slug
- Promotion: discount campaign scoped to one store
- Bundle: priced product set scoped to one store
- Product: catalog item scoped to one store
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, List
import uuid

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


def new_id() -> str:
    """Primary keys are UUID strings"""
    return str(uuid.uuid4())


class DiscountType(str, Enum):
    """Promotion discount type"""
    PERCENT = "percent"
    FIXED = "fixed"


class Store(Base):
    """Store (tenant) owning promotions, bundles and products"""
    __tablename__ = "stores"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    promotions: Mapped[List["Promotion"]] = relationship(back_populates="store")
    bundles: Mapped[List["Bundle"]] = relationship(back_populates="store")
    products: Mapped[List["Product"]] = relationship(back_populates="store")

    def __repr__(self) -> str:
        return f"<Store {self.slug}>"


class Promotion(Base):
    """Discount campaign"""
    __tablename__ = "promotions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    store_id: Mapped[str] = mapped_column(String(36), ForeignKey("stores.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    discount_type: Mapped[str] = mapped_column(String(20), default=DiscountType.PERCENT.value)
    discount_value: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    start_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    end_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    store: Mapped["Store"] = relationship(back_populates="promotions")

    __table_args__ = (
        Index("idx_promotions_store", "store_id"),
    )


class Bundle(Base):
    """Set of products sold together at one price"""
    __tablename__ = "bundles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    store_id: Mapped[str] = mapped_column(String(36), ForeignKey("stores.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    store: Mapped["Store"] = relationship(back_populates="bundles")

    __table_args__ = (
        Index("idx_bundles_store", "store_id"),
    )


class Product(Base):
    """Catalog item"""
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    store_id: Mapped[str] = mapped_column(String(36), ForeignKey("stores.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    barcode: Mapped[Optional[str]] = mapped_column(String(64))
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, default=0)
    unit: Mapped[str] = mapped_column(String(20), default="dona")
    active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    store: Mapped["Store"] = relationship(back_populates="products")

    __table_args__ = (
        Index("idx_products_store", "store_id"),
        Index("idx_products_barcode", "barcode"),
    )
