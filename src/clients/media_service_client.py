"""HTTP client for the media service that owns image and video content."""

import logging
from typing import Any

import requests

from src.config import MEDIA_SERVICE_TIMEOUT, MEDIA_SERVICE_URL
from src.services.errors import InternalError

logger = logging.getLogger(__name__)


class MediaServiceClient:
    def __init__(self, base_url: str = MEDIA_SERVICE_URL, timeout: float = MEDIA_SERVICE_TIMEOUT, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = session or requests.Session()

    def get_video(self, video_id: str) -> dict[str, Any] | None:
        """
        Fetch a video record from the media service.

        Args:
            video_id: Media service video ID

        Returns:
            The video payload, or None if the media service does not know the video
        """
        url = f"{self.base_url}/api/videos/{video_id}"
        try:
            r = self.http.get(url, timeout=self.timeout)
        except requests.Timeout as e:
            logger.error(f"Media service timed out fetching video {video_id}")
            raise InternalError("Media service timed out") from e
        except requests.RequestException as e:
            logger.error(f"Media service request failed: {e}")
            raise InternalError("Failed to reach media service") from e

        if r.status_code == 404:
            return None
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            logger.error(f"Media service returned {r.status_code} for video {video_id}")
            raise InternalError("Media service error") from e
        return r.json()

    def video_exists(self, video_id: str) -> bool:
        return self.get_video(video_id) is not None

    def close(self):
        self.http.close()
