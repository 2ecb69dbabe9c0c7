"""
TrainingSessions SQLAlchemy model.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func
from sqlalchemy.sql.schema import CheckConstraint

from src.db.postgres_bootstrap import Base
from src.models.media_owner import MediaOwnerMixin


class TrainingSession(MediaOwnerMixin, Base):
    __tablename__ = "training_sessions"
    owner_type = "training_session"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    short_description = Column(String(255), nullable=False)
    long_description = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    duration_minutes = Column(Integer, CheckConstraint("duration_minutes > 0"), nullable=False)
    format = Column(String(50), nullable=False)  # online | offline
    in_stock = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    def __repr__(self):
        return f"<TrainingSession(id={self.id}, name={self.name}, format={self.format}, duration_minutes={self.duration_minutes})>"
