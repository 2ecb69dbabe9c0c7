"""
Products SQLAlchemy model.

A product is the sellable half of a catalog item: it carries the price and the
publication/soft-delete state, and points at exactly one details record through
(details_id, details_type).
"""

from sqlalchemy import Boolean, Column, DateTime, Numeric, String, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.sql.schema import CheckConstraint

from src.db.postgres_bootstrap import Base

DETAILS_TYPES = ("physical_good", "training_session", "seminar", "course")


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True)
    price = Column(Numeric(10, 2), CheckConstraint("price > 0"), nullable=False)
    details_id = Column(String(36), nullable=False, index=True)
    details_type = Column(String(50), nullable=False, index=True)
    in_stock = Column(Boolean, nullable=False, default=False)  # publication flag

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    __table_args__ = (UniqueConstraint("details_id", "details_type", name="uq_product_details"),)

    def __repr__(self):
        return f"<Product(id={self.id}, price={self.price}, details_id={self.details_id}, details_type={self.details_type}, in_stock={self.in_stock})>"
