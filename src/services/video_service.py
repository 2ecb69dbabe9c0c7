"""Video attachment for any video owner."""

import logging
from typing import Any

from pydantic import BaseModel

from src.clients.media_service_client import MediaServiceClient
from src.schemas.media import AddVideoRequest, RemoveVideoRequest
from src.services.errors import OwnerNotFoundError, VideoInUseError, VideoNotFoundError, translate_errors
from src.services.owner_adapters import VideoOwnerRepo
from src.utils.validation import validate_request

logger = logging.getLogger(__name__)


class VideoManager:
    """Sets or clears the single video reference an owner holds."""

    def __init__(self, media_client: MediaServiceClient | None = None):
        self.media_client = media_client or MediaServiceClient()

    def add(self, req: BaseModel | dict[str, Any], owners: VideoOwnerRepo) -> None:
        """
        Point an owner at a media-service video, replacing any previous one.

        Raises:
            VideoNotFoundError: the media service does not know the video
            OwnerNotFoundError: no such owner, or it is soft-deleted
            VideoInUseError: the owner already references this video
        """
        req = validate_request(AddVideoRequest, req)
        if not self.media_client.video_exists(req.media_service_id):
            raise VideoNotFoundError("Video not found")

        with owners.db.transaction() as session:
            repo = owners.with_tx(session)
            with translate_errors("Failed to retrieve owner"):
                owner = repo.get_with_unpublished(req.owner_id, for_update=True)
            if owner is None:
                raise OwnerNotFoundError("Owner not found")
            if owner.video_id == req.media_service_id:
                raise VideoInUseError("Video is already attached to this owner")

            previous = owner.video_id
            with translate_errors("Failed to add video for owner"):
                repo.update_video_id(owner.id, req.media_service_id)

        if previous:
            logger.info(f"Replaced video {previous} on {owners.owner_type} {req.owner_id}")
        logger.info(f"Attached video {req.media_service_id} to {owners.owner_type} {req.owner_id}")

    def remove(self, req: BaseModel | dict[str, Any], owners: VideoOwnerRepo) -> None:
        req = validate_request(RemoveVideoRequest, req)

        with owners.db.transaction() as session:
            repo = owners.with_tx(session)
            with translate_errors("Failed to retrieve owner"):
                owner = repo.get_with_unpublished(req.owner_id, for_update=True)
            if owner is None:
                raise OwnerNotFoundError("Owner not found")

            with translate_errors("Failed to remove video for owner"):
                repo.update_video_id(owner.id, None)

        logger.info(f"Removed video from {owners.owner_type} {req.owner_id}")


# Singleton instance
video_manager = VideoManager()
