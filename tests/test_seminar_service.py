"""Tests for SeminarService date handling."""

from datetime import datetime, timedelta, timezone

import pytest

from src.services.errors import InvalidArgumentError


class TestSeminarService:
    @pytest.fixture
    def seminar(self, seminar_service, seminar_payload):
        return seminar_service.create(seminar_payload)

    def test_create_seminar(self, seminar_service, seminar):
        dto = seminar_service.get_with_unpublished(seminar.id)

        assert dto.place == "Berlin"
        assert dto.late_payment_date < dto.date < dto.ending_date

    def test_create_in_the_past(self, seminar_service, seminar_payload):
        start = datetime.now(timezone.utc) - timedelta(days=1)
        seminar_payload.update(
            date=start.isoformat(),
            ending_date=(start + timedelta(hours=2)).isoformat(),
            late_payment_date=(start - timedelta(days=1)).isoformat(),
        )

        with pytest.raises(InvalidArgumentError):
            seminar_service.create(seminar_payload)

    def test_create_ending_before_start(self, seminar_service, seminar_payload):
        seminar_payload["ending_date"] = seminar_payload["late_payment_date"]

        with pytest.raises(InvalidArgumentError):
            seminar_service.create(seminar_payload)

    def test_update_checks_merged_dates(self, seminar_service, seminar, seminar_payload):
        """Test a partial date update is checked against the stored dates."""
        too_late = datetime.fromisoformat(seminar_payload["ending_date"]) + timedelta(days=1)

        with pytest.raises(InvalidArgumentError, match="Invalid seminar dates"):
            seminar_service.update({"id": seminar.id, "late_payment_date": too_late.isoformat()})

    def test_update_moves_ending_date(self, seminar_service, seminar, seminar_payload):
        later = datetime.fromisoformat(seminar_payload["ending_date"]) + timedelta(hours=2)

        result = seminar_service.update({"id": seminar.id, "ending_date": later.isoformat()})

        assert list(result["details"]) == ["ending_date"]

    def test_update_same_date_is_noop(self, seminar_service, seminar, seminar_payload):
        result = seminar_service.update({"id": seminar.id, "date": seminar_payload["date"]})

        assert result == {"details": {}, "product": {}}
