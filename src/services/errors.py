"""Error kinds raised by the catalog services."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for every error a service surfaces to its caller."""

    code = 500

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"detail": self.message}
        if self.details is not None:
            body["errors"] = self.details
        return body


class InvalidArgumentError(ServiceError):
    code = 400


class NotFoundError(ServiceError):
    code = 404


class OwnerNotFoundError(NotFoundError):
    pass


class OwnersNotFoundError(NotFoundError):
    pass


class ImageNotFoundOnOwnerError(NotFoundError):
    pass


class AssociationsNotFoundError(NotFoundError):
    pass


class VideoNotFoundError(NotFoundError):
    pass


class ImageLimitExceededError(ServiceError):
    code = 400


class ImageAlreadyAttachedError(ServiceError):
    code = 409


class VideoInUseError(ServiceError):
    code = 409


class PreconditionFailedError(ServiceError):
    code = 400


class InternalError(ServiceError):
    code = 500


@contextmanager
def translate_errors(message: str) -> Iterator[None]:
    """Re-raise persistence failures inside the block as InternalError(message)."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"{message}: {e}")
        raise InternalError(message) from e
