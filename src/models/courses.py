"""
Courses SQLAlchemy model.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from src.db.postgres_bootstrap import Base
from src.models.media_owner import MediaOwnerMixin


class Course(MediaOwnerMixin, Base):
    __tablename__ = "courses"
    owner_type = "course"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    topic = Column(String(128), nullable=False)
    short_description = Column(String(255), nullable=False)  # brief description
    long_description = Column(Text, nullable=True)  # markdown content
    tags = Column(JSON, nullable=False, default=list)
    access_duration = Column(Integer, nullable=False)  # days of access after purchase
    in_stock = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    parts = relationship("CoursePart", back_populates="course", order_by="CoursePart.number", lazy="selectin")

    def __repr__(self):
        return f"<Course(id={self.id}, name={self.name}, topic={self.topic}, in_stock={self.in_stock})>"
