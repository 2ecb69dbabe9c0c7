"""Course part management."""

import logging
from typing import Any

from pydantic import BaseModel

from src.config import DEFAULT_PAGE_LIMIT
from src.db.postgres_client import PostgresConnection, db
from src.models import CoursePart
from src.repositories import CoursePartRepository, CourseRepository
from src.schemas.common import ListResponse
from src.schemas.course_part import (
    CoursePartOut,
    CreateCoursePartRequest,
    CreateCoursePartResponse,
    UpdateCoursePartRequest,
)
from src.services.errors import InvalidArgumentError, NotFoundError, PreconditionFailedError, translate_errors
from src.services.lifecycle_service import check_page
from src.utils.validation import ensure_uuid, new_id, validate_request

logger = logging.getLogger(__name__)


class CoursePartService:
    update_fields = ("name", "short_description", "long_description", "number", "tags")

    def __init__(self, database: PostgresConnection = db):
        self.db = database
        self.part_repo = CoursePartRepository(database)
        self.course_repo = CourseRepository(database)

    def create(self, req: BaseModel | dict[str, Any]) -> CreateCoursePartResponse:
        """Add an unpublished part to an existing course."""
        req = validate_request(CreateCoursePartRequest, req)

        with self.db.transaction() as session:
            part_repo = self.part_repo.with_tx(session)
            course_repo = self.course_repo.with_tx(session)
            with translate_errors("Failed to get course"):
                course = course_repo.select_fields(req.course_id, "id")
            if course is None:
                raise NotFoundError("Course not found")

            with translate_errors("Failed to create course part"):
                if part_repo.count_by_number(req.course_id, req.number):
                    raise InvalidArgumentError(f"Course part number {req.number} is already taken")
                part = CoursePart(
                    id=new_id(),
                    course_id=req.course_id,
                    number=req.number,
                    name=req.name,
                    short_description=req.short_description,
                    tags=[],
                    published=False,
                )
                part_repo.create(part)

        logger.info(f"Created course part {part.id} for course {req.course_id}")
        return CreateCoursePartResponse(id=part.id, course_id=req.course_id)

    def get(self, id: str) -> CoursePartOut:
        return self._get(id, "get")

    def get_with_unpublished(self, id: str) -> CoursePartOut:
        return self._get(id, "get_with_unpublished")

    def _get(self, id: str, getter: str) -> CoursePartOut:
        ensure_uuid(id, "course part")
        with self.db.transaction() as session:
            part_repo = self.part_repo.with_tx(session)
            with translate_errors("Failed to get course part"):
                part = getattr(part_repo, getter)(id)
            if part is None:
                raise NotFoundError("Course part not found")
            return CoursePartOut.model_validate(part)

    def list(
        self, course_id: str, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0, include_unpublished: bool = False
    ) -> ListResponse[CoursePartOut]:
        """List the not deleted parts of a course ordered by part number."""
        ensure_uuid(course_id, "course")
        limit, offset = check_page(limit, offset)
        scope = "with_unpublished" if include_unpublished else "published"

        with self.db.transaction() as session:
            part_repo = self.part_repo.with_tx(session)
            with translate_errors("Failed to list course parts"):
                rows = part_repo.list_by_course(course_id, limit, offset, scope)
                total = part_repo.count_by_course(course_id, scope)
            items = [CoursePartOut.model_validate(row) for row in rows]

        return ListResponse[CoursePartOut](items=items, total=total)

    def update(self, req: BaseModel | dict[str, Any]) -> dict[str, Any]:
        """Write the changed fields of a course part and return them."""
        req = validate_request(UpdateCoursePartRequest, req)

        with self.db.transaction() as session:
            part_repo = self.part_repo.with_tx(session)
            with translate_errors("Failed to get course part"):
                part = part_repo.get_with_unpublished(req.id, for_update=True)
            if part is None:
                raise NotFoundError("Course part not found")

            updates = {
                field: getattr(req, field)
                for field in self.update_fields
                if getattr(req, field) is not None and getattr(req, field) != getattr(part, field)
            }
            if not updates:
                return updates

            with translate_errors("Failed to update course part"):
                if "number" in updates and part_repo.count_by_number(part.course_id, updates["number"], part.id):
                    raise InvalidArgumentError(f"Course part number {updates['number']} is already taken")
                part_repo.update(part, updates)

        logger.info(f"Updated course part {req.id}: {sorted(updates)}")
        return updates

    def publish(self, id: str) -> None:
        """Publish a part; its course has to be published first."""
        ensure_uuid(id, "course part")

        with self.db.transaction() as session:
            part_repo = self.part_repo.with_tx(session)
            course_repo = self.course_repo.with_tx(session)
            with translate_errors("Failed to get course part"):
                part = part_repo.get_with_unpublished(id, for_update=True)
            if part is None:
                raise NotFoundError("Course part not found")

            with translate_errors("Failed to get course"):
                course = course_repo.select_fields(part.course_id, "in_stock")
            if course is None:
                raise NotFoundError("Course not found")
            if not course.in_stock:
                raise PreconditionFailedError("Cannot publish a part of an unpublished course")

            with translate_errors("Failed to publish course part"):
                part_repo.set_published(id, True)

        logger.info(f"Published course part {id}")

    def unpublish(self, id: str) -> None:
        ensure_uuid(id, "course part")

        with self.db.transaction() as session:
            part_repo = self.part_repo.with_tx(session)
            with translate_errors("Failed to unpublish course part"):
                affected = part_repo.set_published(id, False)
            if not affected:
                raise NotFoundError("Course part not found")

        logger.info(f"Unpublished course part {id}")


# Singleton instance
course_part_service = CoursePartService()
