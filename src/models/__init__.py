"""
Init file for the SQLAlchemy models.
"""

from .course_parts import CoursePart
from .courses import Course
from .images import Image
from .physical_goods import PhysicalGood
from .products import Product
from .seminars import Seminar
from .training_sessions import TrainingSession

__all__ = [
    "Course",
    "CoursePart",
    "Image",
    "PhysicalGood",
    "Product",
    "Seminar",
    "TrainingSession",
]
