"""
Repositories wrapping SQLAlchemy queries for each table.
"""

from .course_part_repository import CoursePartRepository
from .details_repository import (
    CourseRepository,
    DetailsRepository,
    PhysicalGoodRepository,
    SeminarRepository,
    TrainingSessionRepository,
)
from .product_repository import ProductRepository

__all__ = [
    "CoursePartRepository",
    "CourseRepository",
    "DetailsRepository",
    "PhysicalGoodRepository",
    "ProductRepository",
    "SeminarRepository",
    "TrainingSessionRepository",
]
