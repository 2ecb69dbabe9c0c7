"""Tests for the owner adapters."""

import pytest

from src.models import Course, Image, PhysicalGood
from src.services.errors import InternalError
from src.services.owner_adapters import CoursePartOwnerAdapter, DetailsOwnerAdapter, image_owners, video_owners


class TestOwnerAdapters:
    @pytest.fixture
    def course_owners(self, database):
        return image_owners(database)["course"]

    def test_registries(self, database):
        images = image_owners(database)
        videos = video_owners(database)

        assert set(images) == {"course", "training_session", "seminar", "physical_good"}
        assert all(isinstance(adapter, DetailsOwnerAdapter) for adapter in images.values())
        assert isinstance(videos["course_part"], CoursePartOwnerAdapter)
        assert "course_part" not in images

    def test_with_tx_keeps_family(self, database, course_owners):
        with database.transaction() as session:
            bound = course_owners.with_tx(session)

            assert isinstance(bound, DetailsOwnerAdapter)
            assert bound.owner_type == "course"
            assert bound.repo.session is session

    def test_add_image_rejects_foreign_owner(self, database, course_owners):
        """Test a single-owner write refuses an owner of another family."""
        foreign = PhysicalGood(id="5b0e4a52-8f3e-4a5e-9d11-2f4c6a7b8c9d", name="Workbook")

        with database.transaction() as session:
            with pytest.raises(InternalError, match="incorrect owner type"):
                course_owners.with_tx(session).add_image(foreign, Image(id="img"))

    def test_batch_skips_foreign_owner(self, database, course_owners, course_service, course_payload):
        """Test a batch write ignores owners of another family."""
        created = course_service.create(course_payload)
        foreign = PhysicalGood(id="5b0e4a52-8f3e-4a5e-9d11-2f4c6a7b8c9d", name="Workbook")
        fields = {
            "media_service_id": "7a6b5c4d-3e2f-4a1b-8c9d-0e1f2a3b4c5d",
            "url": "http://media.local/a.png",
            "secure_url": "https://media.local/a.png",
            "public_id": "catalog/a",
        }
        ids = iter(["11111111-1111-4111-8111-111111111111", "22222222-2222-4222-8222-222222222222"])

        with database.transaction() as session:
            owners = course_owners.with_tx(session)
            course = owners.get_with_unpublished(created.id)
            owners.add_image_batch([course, foreign], fields, lambda: next(ids))

            assert isinstance(course, Course)
            assert [image.owner_id for image in course.images] == [created.id]
