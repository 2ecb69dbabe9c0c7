"""
Seminars SQLAlchemy model.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text
from sqlalchemy.sql import func

from src.db.postgres_bootstrap import Base
from src.models.media_owner import MediaOwnerMixin


class Seminar(MediaOwnerMixin, Base):
    __tablename__ = "seminars"
    owner_type = "seminar"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    short_description = Column(String(255), nullable=False)
    long_description = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    place = Column(String(255), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    ending_date = Column(DateTime(timezone=True), nullable=False)
    late_payment_date = Column(DateTime(timezone=True), nullable=False)
    in_stock = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    def __repr__(self):
        return f"<Seminar(id={self.id}, name={self.name}, place={self.place}, date={self.date})>"
