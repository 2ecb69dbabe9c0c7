"""Tests for request validation helpers and schema rules."""

import pytest

from src.schemas.course import CreateCourseRequest
from src.schemas.media import RemoveVideoRequest
from src.schemas.training_session import UpdateTrainingSessionRequest
from src.services.errors import InvalidArgumentError
from src.utils.validation import ensure_uuid, validate_request


class TestValidation:
    def test_ensure_uuid(self):
        value = "6f1c2b9e-3d4a-4f5b-8c7d-9e0a1b2c3d4e"

        assert ensure_uuid(value, "course") == value

    @pytest.mark.parametrize("value", ["", "abc", None, 42])
    def test_ensure_uuid_rejects(self, value):
        with pytest.raises(InvalidArgumentError, match="Invalid seminar ID"):
            ensure_uuid(value, "seminar")

    def test_validate_request_passes_models_through(self):
        req = UpdateTrainingSessionRequest(id="6f1c2b9e-3d4a-4f5b-8c7d-9e0a1b2c3d4e")

        assert validate_request(UpdateTrainingSessionRequest, req) is req

    @pytest.mark.parametrize(
        "field, value",
        [
            ("name", "1st course"),
            ("name", "Py"),
            ("topic", "AI"),
            ("access_duration", 0),
            ("price", "0"),
            ("price", "-5"),
        ],
    )
    def test_course_rules(self, course_payload, field, value):
        course_payload[field] = value

        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_request(CreateCourseRequest, course_payload)

        assert exc_info.value.details[0]["loc"] == [field]

    def test_duration_must_be_multiple_of_30(self):
        with pytest.raises(InvalidArgumentError):
            validate_request(
                UpdateTrainingSessionRequest,
                {"id": "6f1c2b9e-3d4a-4f5b-8c7d-9e0a1b2c3d4e", "duration_minutes": 20},
            )

    def test_remove_video_request_takes_owner_only(self):
        req = validate_request(RemoveVideoRequest, {"owner_id": "6f1c2b9e-3d4a-4f5b-8c7d-9e0a1b2c3d4e"})

        assert set(RemoveVideoRequest.model_fields) == {"owner_id"}
        assert req.owner_id == "6f1c2b9e-3d4a-4f5b-8c7d-9e0a1b2c3d4e"
