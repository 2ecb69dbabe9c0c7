"""
CourseParts SQLAlchemy model.

Course parts are ordered lessons of a course. They are not sold on their own,
so they have no product and use a 'published' flag instead of 'in_stock'.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from src.db.postgres_bootstrap import Base


class CoursePart(Base):
    __tablename__ = "course_parts"
    owner_type = "course_part"

    id = Column(String(36), primary_key=True)
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    number = Column(Integer, nullable=False)  # position of the part in the course
    name = Column(String(255), nullable=False)
    short_description = Column(String(255), nullable=False)
    long_description = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    published = Column(Boolean, nullable=False, default=False)
    video_id = Column(String(36), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    course = relationship("Course", back_populates="parts")

    __table_args__ = (UniqueConstraint("course_id", "number", name="uq_course_part_number"),)

    def __repr__(self):
        return f"<CoursePart(id={self.id}, course_id={self.course_id}, number={self.number}, name={self.name})>"
