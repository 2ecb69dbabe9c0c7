"""Image attachment for any image owner."""

import logging
from typing import Any

from pydantic import BaseModel

from src.config import MAX_UPLOADED_IMAGES
from src.models import Image
from src.schemas.media import AddImageBatchRequest, AddImageRequest, DeleteImageBatchRequest, DeleteImageRequest
from src.services.errors import (
    AssociationsNotFoundError,
    ImageAlreadyAttachedError,
    ImageLimitExceededError,
    ImageNotFoundOnOwnerError,
    OwnerNotFoundError,
    OwnersNotFoundError,
    translate_errors,
)
from src.services.owner_adapters import ImageOwner, ImageOwnerRepo
from src.utils.validation import new_id, validate_request

logger = logging.getLogger(__name__)


def _has_image(owner: ImageOwner, media_service_id: str) -> bool:
    return any(image.media_service_id == media_service_id for image in owner.images)


class ImageService:
    """
    Attaches media-service images to owners and keeps each owner's
    ``uploaded_image_amount`` equal to the number of images it holds.

    Every operation runs in one transaction and reads owners with a row
    lock, so concurrent uploads to the same owner cannot overshoot the cap.
    """

    def __init__(self, max_images: int = MAX_UPLOADED_IMAGES):
        self.max_images = max_images

    def add_image(self, req: BaseModel | dict[str, Any], owners: ImageOwnerRepo) -> None:
        req = validate_request(AddImageRequest, req)

        with owners.db.transaction() as session:
            repo = owners.with_tx(session)
            with translate_errors("Failed to retrieve owner"):
                owner = repo.get_with_unpublished(req.owner_id, for_update=True)
            if owner is None:
                raise OwnerNotFoundError("Owner not found")

            if owner.uploaded_image_amount >= self.max_images:
                raise ImageLimitExceededError(f"Maximum number of uploaded images is {self.max_images} per item")
            if _has_image(owner, req.media_service_id):
                raise ImageAlreadyAttachedError("Image is already attached to this owner")

            image = Image(
                id=new_id(),
                media_service_id=req.media_service_id,
                url=req.url,
                secure_url=req.secure_url,
                public_id=req.public_id,
            )
            with translate_errors("Failed to add image for owner"):
                repo.add_image(owner, image)
                owner.uploaded_image_amount += 1
                repo.save(owner)

        logger.info(f"Attached image {req.media_service_id} to {owners.owner_type} {req.owner_id}")

    def delete_image(self, req: BaseModel | dict[str, Any], owners: ImageOwnerRepo) -> None:
        req = validate_request(DeleteImageRequest, req)

        with owners.db.transaction() as session:
            repo = owners.with_tx(session)
            with translate_errors("Failed to retrieve owner"):
                owner = repo.get_with_unpublished(req.owner_id, for_update=True)
            if owner is None:
                raise OwnerNotFoundError("Owner not found")
            if not _has_image(owner, req.media_service_id):
                raise ImageNotFoundOnOwnerError("Image not found on owner")

            with translate_errors("Failed to delete image for owner"):
                repo.delete_image(owner, req.media_service_id)
                owner.uploaded_image_amount = max(owner.uploaded_image_amount - 1, 0)
                repo.save(owner)

        logger.info(f"Detached image {req.media_service_id} from {owners.owner_type} {req.owner_id}")

    def add_image_batch(self, req: BaseModel | dict[str, Any], owners: ImageOwnerRepo) -> int:
        """
        Attach one image to several owners.

        Owners that are at the cap or already hold the image are skipped.

        Returns:
            Number of owners the image was attached to
        """
        req = validate_request(AddImageBatchRequest, req)

        with owners.db.transaction() as session:
            repo = owners.with_tx(session)
            with translate_errors("Failed to retrieve owners"):
                found = repo.list_with_unpublished_by_ids(req.owner_ids, for_update=True)
            if not found:
                raise OwnersNotFoundError("Owners not found")

            eligible = [
                owner
                for owner in found
                if owner.uploaded_image_amount < self.max_images and not _has_image(owner, req.media_service_id)
            ]
            if not eligible:
                return 0

            fields = {
                "media_service_id": req.media_service_id,
                "url": req.url,
                "secure_url": req.secure_url,
                "public_id": req.public_id,
            }
            with translate_errors("Failed to add images for owners"):
                repo.add_image_batch(eligible, fields, new_id)
                for owner in eligible:
                    owner.uploaded_image_amount += 1
                repo.save(*eligible)

        logger.info(f"Attached image {req.media_service_id} to {len(eligible)} {owners.owner_type} owners")
        return len(eligible)

    def delete_image_batch(self, req: BaseModel | dict[str, Any], owners: ImageOwnerRepo) -> int:
        """
        Detach one image from every listed owner that holds it.

        Returns:
            Number of owners the image was removed from
        """
        req = validate_request(DeleteImageBatchRequest, req)

        with owners.db.transaction() as session:
            repo = owners.with_tx(session)
            with translate_errors("Failed to retrieve owners"):
                found = repo.list_with_unpublished_by_ids(req.owner_ids, for_update=True)
            if not found:
                raise OwnersNotFoundError("Owners not found")

            with translate_errors("Failed to find image associations"):
                owner_ids = repo.find_owner_ids_by_image_id(req.media_service_id, [owner.id for owner in found])
            if not owner_ids:
                raise AssociationsNotFoundError("Image is not attached to any of the owners")

            with translate_errors("Failed to delete images for owners"):
                repo.delete_image_batch(owner_ids, req.media_service_id)
                repo.decrement_image_count(owner_ids)

        logger.info(f"Detached image {req.media_service_id} from {len(owner_ids)} {owners.owner_type} owners")
        return len(owner_ids)


# Singleton instance
image_service = ImageService()
