"""Physical good lifecycle."""

from src.models import PhysicalGood
from src.repositories import PhysicalGoodRepository
from src.schemas.physical_good import CreatePhysicalGoodRequest, PhysicalGoodDetails, UpdatePhysicalGoodRequest
from src.services.lifecycle_service import LifecycleService
from src.utils.validation import new_id


class PhysicalGoodService(LifecycleService[PhysicalGood]):
    details_type = "physical_good"
    label = "physical good"
    repository_class = PhysicalGoodRepository
    create_request = CreatePhysicalGoodRequest
    update_request = UpdatePhysicalGoodRequest
    details_schema = PhysicalGoodDetails
    update_fields = LifecycleService.update_fields + ("shipping_required",)

    def _build_details(self, req: CreatePhysicalGoodRequest) -> PhysicalGood:
        return PhysicalGood(
            id=new_id(),
            name=req.name,
            short_description=req.short_description,
            shipping_required=req.shipping_required,
            tags=[],
            in_stock=False,
            uploaded_image_amount=0,
        )


# Singleton instance
physical_good_service = PhysicalGoodService()
