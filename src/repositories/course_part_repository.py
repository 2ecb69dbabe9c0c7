"""Course part data access."""

from sqlalchemy import func

from src.models import CoursePart
from src.repositories.base import Repository


class CoursePartRepository(Repository[CoursePart]):
    model = CoursePart
    publication_flag = "published"

    def get(self, id: str) -> CoursePart | None:
        return self._get(id, "published")

    def get_with_unpublished(self, id: str, for_update: bool = False) -> CoursePart | None:
        return self._get(id, "with_unpublished", for_update)

    def get_with_deleted(self, id: str) -> CoursePart | None:
        return self._get(id, "with_deleted")

    def _by_course(self, scope: str, course_id: str):
        return self._query(scope).filter(CoursePart.course_id == course_id)

    def list_by_course(self, course_id: str, limit: int, offset: int, scope: str = "published") -> list[CoursePart]:
        return self._by_course(scope, course_id).order_by(CoursePart.number).limit(limit).offset(offset).all()

    def count_by_course(self, course_id: str, scope: str = "published") -> int:
        return self._by_course(scope, course_id).count()

    def count_by_number(self, course_id: str, number: int, exclude_id: str | None = None) -> int:
        """Count parts of a course, soft-deleted ones included, that use a part number."""
        query = self.session.query(func.count(CoursePart.id)).filter(
            CoursePart.course_id == course_id, CoursePart.number == number
        )
        if exclude_id:
            query = query.filter(CoursePart.id != exclude_id)
        return query.scalar()

    def set_published(self, id: str, published: bool) -> int:
        return self._query("with_unpublished").filter(CoursePart.id == id).update({"published": published})

    def set_published_by_course_id(self, course_id: str, published: bool) -> int:
        return self._by_course("with_unpublished", course_id).update({"published": published})

    def soft_delete_by_course_id(self, course_id: str) -> int:
        return self._by_course("with_unpublished", course_id).update({"deleted_at": self._now()})

    def restore_by_course_id(self, course_id: str) -> int:
        return self._by_course("deleted", course_id).update({"deleted_at": None})

    def delete_permanent_by_course_id(self, course_id: str) -> int:
        return self._by_course("with_deleted", course_id).delete()

    def update_video_id(self, owner_id: str, video_id: str | None) -> int:
        return self._query("with_unpublished").filter(CoursePart.id == owner_id).update({"video_id": video_id})
