"""
Columns and relationships shared by every model that can own media.
"""

from sqlalchemy import Column, Integer, String, and_
from sqlalchemy.orm import declared_attr, foreign, relationship

from src.models.images import Image


class MediaOwnerMixin:
    # Discriminator stored in Image.owner_type, set by each concrete model
    owner_type = ""

    uploaded_image_amount = Column(Integer, nullable=False, default=0)
    video_id = Column(String(36), nullable=True, index=True)  # media service video id

    @declared_attr
    def images(cls):
        return relationship(
            Image,
            primaryjoin=lambda: and_(cls.id == foreign(Image.owner_id), Image.owner_type == cls.owner_type),
            order_by=Image.created_at,
            lazy="selectin",
            viewonly=True,
        )
