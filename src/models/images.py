"""
Images SQLAlchemy model.

An image row belongs to exactly one owner, addressed polymorphically by
(owner_id, owner_type). Binary content lives in the media service; only its
identifiers and URLs are stored here.
"""

from sqlalchemy import Column, DateTime, Index, String, UniqueConstraint
from sqlalchemy.sql import func

from src.db.postgres_bootstrap import Base


class Image(Base):
    __tablename__ = "images"

    id = Column(String(36), primary_key=True)
    owner_id = Column(String(36), nullable=False)
    owner_type = Column(String(50), nullable=False)
    url = Column(String(512), nullable=False)
    secure_url = Column(String(512), nullable=False)
    public_id = Column(String(255), nullable=False)
    media_service_id = Column(String(36), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("owner_id", "owner_type", "media_service_id", name="uq_image_owner_media"),
        Index("idx_image_owner", "owner_id", "owner_type"),
    )

    def __repr__(self):
        return f"<Image(id={self.id}, owner_id={self.owner_id}, owner_type={self.owner_type}, media_service_id={self.media_service_id})>"
