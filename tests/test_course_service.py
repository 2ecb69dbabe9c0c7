"""Tests for CourseService and the course part cascade."""

import pytest

from src.services.errors import NotFoundError


class TestCourseService:
    @pytest.fixture
    def course(self, course_service, course_payload):
        return course_service.create(course_payload)

    @pytest.fixture
    def parts(self, course, course_part_service):
        first = course_part_service.create(
            {"course_id": course.id, "name": "Introduction", "short_description": "Getting started", "number": 1}
        )
        second = course_part_service.create(
            {"course_id": course.id, "name": "Functions", "short_description": "Defining functions", "number": 2}
        )
        return first, second

    def test_create_course(self, course_service, course):
        dto = course_service.get_with_unpublished(course.id)

        assert dto.topic == "Programming"
        assert dto.access_duration == 30
        assert dto.parts == []

    def test_update_course_fields(self, course_service, course):
        result = course_service.update({"id": course.id, "topic": "Python", "access_duration": 60})

        assert result["details"] == {"topic": "Python", "access_duration": 60}
        assert result["product"] == {}

    def test_get_shows_only_published_parts(self, course_service, course_part_service, course, parts):
        """Test published reads hide unpublished parts."""
        course_service.publish(course.id)
        course_part_service.publish(parts[0].id)

        dto = course_service.get(course.id)

        assert [part.id for part in dto.parts] == [parts[0].id]
        assert len(course_service.get_with_unpublished(course.id).parts) == 2

    def test_unpublish_cascades_to_parts(self, course_service, course_part_service, course, parts):
        course_service.publish(course.id)
        course_part_service.publish(parts[0].id)

        course_service.unpublish(course.id)

        with pytest.raises(NotFoundError):
            course_part_service.get(parts[0].id)
        assert course_part_service.get_with_unpublished(parts[0].id).published is False

    def test_delete_and_restore_cascade_to_parts(self, course_service, course_part_service, course, parts):
        course_service.delete(course.id)

        with pytest.raises(NotFoundError):
            course_part_service.get_with_unpublished(parts[0].id)
        assert course_part_service.list(course.id, include_unpublished=True).total == 0

        course_service.restore(course.id)

        assert course_part_service.list(course.id, include_unpublished=True).total == 2

    def test_delete_permanent_removes_parts(self, course_service, course_part_service, course, parts):
        course_service.delete_permanent(course.id)

        with pytest.raises(NotFoundError):
            course_service.get_with_deleted(course.id)
        with pytest.raises(NotFoundError):
            course_part_service.get_with_unpublished(parts[1].id)
