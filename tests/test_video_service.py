"""Tests for VideoManager."""

import pytest

from src.services.errors import InternalError, OwnerNotFoundError, VideoInUseError, VideoNotFoundError
from src.services.owner_adapters import video_owners
from src.services.video_service import VideoManager

VIDEO_ID = "6f1c2b9e-3d4a-4f5b-8c7d-9e0a1b2c3d4e"
OTHER_VIDEO_ID = "0b9a8c7d-6e5f-4a3b-9c2d-1e0f9a8b7c6d"
MISSING_ID = "00000000-0000-4000-8000-000000000000"


class TestVideoManager:
    @pytest.fixture
    def manager(self, media_client):
        return VideoManager(media_client)

    @pytest.fixture
    def owners(self, database):
        return video_owners(database)

    @pytest.fixture
    def course(self, course_service, course_payload):
        return course_service.create(course_payload)

    def test_add_video(self, manager, owners, course_service, course, media_client):
        manager.add({"owner_id": course.id, "media_service_id": VIDEO_ID}, owners["course"])

        assert course_service.get_with_unpublished(course.id).video_id == VIDEO_ID
        media_client.video_exists.assert_called_once_with(VIDEO_ID)

    def test_add_same_video_twice(self, manager, owners, course):
        manager.add({"owner_id": course.id, "media_service_id": VIDEO_ID}, owners["course"])

        with pytest.raises(VideoInUseError):
            manager.add({"owner_id": course.id, "media_service_id": VIDEO_ID}, owners["course"])

    def test_replace_video(self, manager, owners, course_service, course):
        manager.add({"owner_id": course.id, "media_service_id": VIDEO_ID}, owners["course"])

        manager.add({"owner_id": course.id, "media_service_id": OTHER_VIDEO_ID}, owners["course"])

        assert course_service.get_with_unpublished(course.id).video_id == OTHER_VIDEO_ID

    def test_add_unknown_video(self, manager, owners, course_service, course, media_client):
        media_client.video_exists.return_value = False

        with pytest.raises(VideoNotFoundError):
            manager.add({"owner_id": course.id, "media_service_id": VIDEO_ID}, owners["course"])

        assert course_service.get_with_unpublished(course.id).video_id is None

    def test_add_media_service_down(self, manager, owners, course, media_client):
        media_client.video_exists.side_effect = InternalError("Failed to reach media service")

        with pytest.raises(InternalError):
            manager.add({"owner_id": course.id, "media_service_id": VIDEO_ID}, owners["course"])

    def test_add_missing_owner(self, manager, owners):
        with pytest.raises(OwnerNotFoundError):
            manager.add({"owner_id": MISSING_ID, "media_service_id": VIDEO_ID}, owners["seminar"])

    def test_remove_video(self, manager, owners, course_service, course):
        manager.add({"owner_id": course.id, "media_service_id": VIDEO_ID}, owners["course"])

        manager.remove({"owner_id": course.id}, owners["course"])

        assert course_service.get_with_unpublished(course.id).video_id is None

    def test_remove_missing_owner(self, manager, owners):
        with pytest.raises(OwnerNotFoundError):
            manager.remove({"owner_id": MISSING_ID}, owners["course"])

    def test_course_part_video(self, manager, owners, course_part_service, course):
        part = course_part_service.create(
            {"course_id": course.id, "name": "Introduction", "short_description": "Getting started", "number": 1}
        )

        manager.add({"owner_id": part.id, "media_service_id": VIDEO_ID}, owners["course_part"])

        assert course_part_service.get_with_unpublished(part.id).video_id == VIDEO_ID
