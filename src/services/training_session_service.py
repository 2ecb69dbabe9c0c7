"""Training session lifecycle."""

from src.models import TrainingSession
from src.repositories import TrainingSessionRepository
from src.schemas.training_session import (
    CreateTrainingSessionRequest,
    TrainingSessionDetails,
    UpdateTrainingSessionRequest,
)
from src.services.lifecycle_service import LifecycleService
from src.utils.validation import new_id


class TrainingSessionService(LifecycleService[TrainingSession]):
    details_type = "training_session"
    label = "training session"
    repository_class = TrainingSessionRepository
    create_request = CreateTrainingSessionRequest
    update_request = UpdateTrainingSessionRequest
    details_schema = TrainingSessionDetails
    update_fields = LifecycleService.update_fields + ("duration_minutes", "format")

    def _build_details(self, req: CreateTrainingSessionRequest) -> TrainingSession:
        return TrainingSession(
            id=new_id(),
            name=req.name,
            short_description=req.short_description,
            duration_minutes=req.duration_minutes,
            format=req.format,
            tags=[],
            in_stock=False,
            uploaded_image_amount=0,
        )


# Singleton instance
training_session_service = TrainingSessionService()
