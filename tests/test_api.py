"""Tests for the HTTP surface."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.schemas.common import CreateResponse
from src.services.errors import ImageLimitExceededError, InvalidArgumentError, NotFoundError, VideoInUseError

ITEM_ID = "6f1c2b9e-3d4a-4f5b-8c7d-9e0a1b2c3d4e"
PRODUCT_ID = "0b9a8c7d-6e5f-4a3b-9c2d-1e0f9a8b7c6d"


class TestApi:
    @pytest.fixture
    def client(self):
        return TestClient(app)

    @pytest.fixture
    def courses(self):
        service = MagicMock()
        with patch.dict("src.main.LIFECYCLE_SERVICES", {"courses": service}):
            yield service

    @pytest.fixture
    def image_service(self):
        with patch("src.main.image_service") as mock_service:
            yield mock_service

    @pytest.fixture
    def video_manager(self):
        with patch("src.main.video_manager") as mock_manager:
            yield mock_manager

    def test_health(self, client):
        with patch("src.main.db.ping", return_value=True):
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create(self, client, courses):
        courses.create.return_value = CreateResponse(id=ITEM_ID, product_id=PRODUCT_ID)

        response = client.post("/api/courses", json={"name": "Python Basics"})

        assert response.status_code == 201
        assert response.json() == {"id": ITEM_ID, "product_id": PRODUCT_ID}
        courses.create.assert_called_once_with({"name": "Python Basics"})

    def test_unknown_family(self, client):
        response = client.post("/api/gift-cards", json={})

        assert response.status_code == 404

    def test_invalid_argument(self, client, courses):
        courses.create.side_effect = InvalidArgumentError(
            "Invalid request payload", details=[{"loc": ["name"], "msg": "too short"}]
        )

        response = client.post("/api/courses", json={"name": "P"})

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Invalid request payload",
            "errors": [{"loc": ["name"], "msg": "too short"}],
        }

    def test_publish_not_found(self, client, courses):
        courses.publish.side_effect = NotFoundError("Course not found")

        response = client.post(f"/api/courses/{ITEM_ID}/publish")

        assert response.status_code == 404
        assert response.json() == {"detail": "Course not found"}

    def test_update_passes_path_id(self, client, courses):
        courses.update.return_value = {"details": {"topic": "Python"}, "product": {}}

        response = client.patch(f"/api/courses/{ITEM_ID}", json={"topic": "Python"})

        assert response.status_code == 200
        assert response.json() == {"details": {"topic": "Python"}, "product": {}}
        courses.update.assert_called_once_with({"topic": "Python", "id": ITEM_ID})

    def test_get_with_scope(self, client, courses):
        courses.get_with_deleted.return_value = {"id": ITEM_ID}

        response = client.get(f"/api/courses/{ITEM_ID}", params={"include": "deleted"})

        assert response.status_code == 200
        courses.get_with_deleted.assert_called_once_with(ITEM_ID)

    def test_lifecycle_routes(self, client, courses):
        assert client.delete(f"/api/courses/{ITEM_ID}").status_code == 200
        assert client.post(f"/api/courses/{ITEM_ID}/restore").status_code == 200
        assert client.delete(f"/api/courses/{ITEM_ID}/permanent").status_code == 200

        courses.delete.assert_called_once_with(ITEM_ID)
        courses.restore.assert_called_once_with(ITEM_ID)
        courses.delete_permanent.assert_called_once_with(ITEM_ID)

    def test_add_image_limit(self, client, image_service):
        image_service.add_image.side_effect = ImageLimitExceededError("Maximum number of uploaded images is 5 per item")

        response = client.post(f"/api/seminars/{ITEM_ID}/images", json={"media_service_id": PRODUCT_ID})

        assert response.status_code == 400
        payload, owners = image_service.add_image.call_args.args
        assert payload["owner_id"] == ITEM_ID
        assert owners.owner_type == "seminar"

    def test_course_parts_have_no_images(self, client, image_service):
        response = client.post(f"/api/course-parts/{ITEM_ID}/images", json={})

        assert response.status_code == 404
        image_service.add_image.assert_not_called()

    def test_image_batch(self, client, image_service):
        image_service.add_image_batch.return_value = 3

        response = client.post("/api/physical-goods/images/batch", json={"owner_ids": [ITEM_ID]})

        assert response.json() == {"affected": 3}

    def test_add_video_in_use(self, client, video_manager):
        video_manager.add.side_effect = VideoInUseError("Video is already attached to this owner")

        response = client.put(f"/api/course-parts/{ITEM_ID}/video", json={"media_service_id": PRODUCT_ID})

        assert response.status_code == 409
        payload, owners = video_manager.add.call_args.args
        assert payload == {"owner_id": ITEM_ID, "media_service_id": PRODUCT_ID}
        assert owners.owner_type == "course_part"
