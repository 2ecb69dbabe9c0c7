"""Course lifecycle; course parts follow their course."""

import logging

from sqlalchemy.orm import Session

from src.db.postgres_client import PostgresConnection, db
from src.models import Course, Product
from src.repositories import CoursePartRepository, CourseRepository
from src.schemas.course import CourseDetails, CreateCourseRequest, UpdateCourseRequest
from src.services.errors import translate_errors
from src.services.lifecycle_service import LifecycleService
from src.utils.validation import new_id

logger = logging.getLogger(__name__)


class CourseService(LifecycleService[Course]):
    details_type = "course"
    label = "course"
    repository_class = CourseRepository
    create_request = CreateCourseRequest
    update_request = UpdateCourseRequest
    details_schema = CourseDetails
    update_fields = LifecycleService.update_fields + ("topic", "access_duration")

    def __init__(self, database: PostgresConnection = db):
        super().__init__(database)
        self.part_repo = CoursePartRepository(database)

    def _build_details(self, req: CreateCourseRequest) -> Course:
        return Course(
            id=new_id(),
            name=req.name,
            short_description=req.short_description,
            topic=req.topic,
            access_duration=req.access_duration,
            tags=[],
            in_stock=False,
            uploaded_image_amount=0,
        )

    def _cascade(self, session: Session, action: str, id: str) -> None:
        parts = self.part_repo.with_tx(session)
        with translate_errors(f"Failed to {action} course parts"):
            if action == "unpublish":
                affected = parts.set_published_by_course_id(id, False)
            elif action == "delete":
                affected = parts.soft_delete_by_course_id(id)
            elif action == "restore":
                affected = parts.restore_by_course_id(id)
            elif action == "purge":
                affected = parts.delete_permanent_by_course_id(id)
            else:
                raise ValueError(f"unknown course action: {action}")
        if affected:
            logger.debug(f"Course {id}: {action} applied to {affected} parts")

    def _to_details(self, details: Course, product: Product, scope: str) -> CourseDetails:
        dto = super()._to_details(details, product, scope)
        if scope == "published":
            dto.parts = [p for p in dto.parts if p.published and p.deleted_at is None]
        elif scope in ("with_unpublished", "unpublished"):
            dto.parts = [p for p in dto.parts if p.deleted_at is None]
        return dto


# Singleton instance
course_service = CourseService()
