"""Seminar lifecycle."""

from typing import Any

from src.models import Seminar
from src.repositories import SeminarRepository
from src.schemas.common import as_utc
from src.schemas.seminar import CreateSeminarRequest, SeminarDetails, UpdateSeminarRequest, check_seminar_dates
from src.services.errors import InvalidArgumentError
from src.services.lifecycle_service import LifecycleService
from src.utils.validation import new_id

DATE_FIELDS = ("date", "ending_date", "late_payment_date")


class SeminarService(LifecycleService[Seminar]):
    details_type = "seminar"
    label = "seminar"
    repository_class = SeminarRepository
    create_request = CreateSeminarRequest
    update_request = UpdateSeminarRequest
    details_schema = SeminarDetails
    update_fields = LifecycleService.update_fields + ("place",) + DATE_FIELDS

    def _build_details(self, req: CreateSeminarRequest) -> Seminar:
        return Seminar(
            id=new_id(),
            name=req.name,
            short_description=req.short_description,
            place=req.place,
            date=req.date,
            ending_date=req.ending_date,
            late_payment_date=req.late_payment_date,
            tags=[],
            in_stock=False,
            uploaded_image_amount=0,
        )

    def _details_updates(self, req: UpdateSeminarRequest, details: Seminar) -> dict[str, Any]:
        updates = super()._details_updates(req, details)
        if any(field in updates for field in DATE_FIELDS):
            # A partial date update must still leave the stored dates ordered
            merged = {field: as_utc(updates.get(field, getattr(details, field))) for field in DATE_FIELDS}
            try:
                check_seminar_dates(**merged)
            except ValueError as e:
                raise InvalidArgumentError(f"Invalid seminar dates: {e}") from e
        return updates


# Singleton instance
seminar_service = SeminarService()
