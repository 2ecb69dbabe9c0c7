"""
Owner adapters.

The image and video services work on "owners": any record that can have
media attached. They never import a concrete model. Instead each details
family is wrapped once, at composition time, in an adapter bound to that
family's repository. The adapter exposes the owner capabilities below and
forwards every call to the concrete repository.
"""

from typing import Any, Callable, Generic, Protocol, TypeVar

from sqlalchemy.orm import Session

from src.db.postgres_client import PostgresConnection
from src.models import CoursePart, Image
from src.repositories import (
    CoursePartRepository,
    CourseRepository,
    DetailsRepository,
    PhysicalGoodRepository,
    SeminarRepository,
    TrainingSessionRepository,
)
from src.services.errors import InternalError

OwnerT = TypeVar("OwnerT")


class ImageOwner(Protocol):
    id: str
    uploaded_image_amount: int
    images: list[Image]


class VideoOwner(Protocol):
    id: str
    video_id: str | None


class VideoOwnerRepo(Protocol):
    db: PostgresConnection
    owner_type: str

    def with_tx(self, session: Session) -> "VideoOwnerRepo": ...

    def get_with_unpublished(self, id: str, for_update: bool = False) -> VideoOwner | None: ...

    def update_video_id(self, owner_id: str, video_id: str | None) -> int: ...


class ImageOwnerRepo(Protocol):
    db: PostgresConnection
    owner_type: str

    def with_tx(self, session: Session) -> "ImageOwnerRepo": ...

    def get_with_unpublished(self, id: str, for_update: bool = False) -> ImageOwner | None: ...

    def list_with_unpublished_by_ids(self, ids: list[str], for_update: bool = False) -> list[ImageOwner]: ...

    def add_image(self, owner: ImageOwner, image: Image) -> None: ...

    def add_image_batch(self, owners: list[ImageOwner], image_fields: dict[str, Any], id_factory: Callable[[], str]) -> None: ...

    def delete_image(self, owner: ImageOwner, media_service_id: str) -> int: ...

    def delete_image_batch(self, owner_ids: list[str], media_service_id: str) -> int: ...

    def save(self, *owners: ImageOwner) -> None: ...

    def find_owner_ids_by_image_id(self, media_service_id: str, owner_ids: list[str]) -> list[str]: ...

    def decrement_image_count(self, owner_ids: list[str]) -> int: ...


class _RepositoryAdapter(Generic[OwnerT]):
    def __init__(self, repo):
        self.repo = repo

    @property
    def db(self) -> PostgresConnection:
        return self.repo.db

    @property
    def owner_type(self) -> str:
        return self.repo.model.owner_type

    def with_tx(self, session: Session):
        """Return an adapter of the same family bound to the given transaction."""
        return type(self)(self.repo.with_tx(session))

    def _is_own(self, owner: Any) -> bool:
        return isinstance(owner, self.repo.model)

    def _own(self, owner: Any) -> OwnerT:
        if not self._is_own(owner):
            raise InternalError("incorrect owner type")
        return owner

    def get_with_unpublished(self, id: str, for_update: bool = False) -> OwnerT | None:
        return self.repo.get_with_unpublished(id, for_update=for_update)

    def update_video_id(self, owner_id: str, video_id: str | None) -> int:
        return self.repo.update_video_id(owner_id, video_id)


class DetailsOwnerAdapter(_RepositoryAdapter[OwnerT]):
    """Image and video owner capabilities over a details repository."""

    repo: DetailsRepository

    def list_with_unpublished_by_ids(self, ids: list[str], for_update: bool = False) -> list[OwnerT]:
        return self.repo.list_with_unpublished_by_ids(ids, for_update=for_update)

    def add_image(self, owner: OwnerT, image: Image) -> None:
        self.repo.add_image(self._own(owner), image)

    def add_image_batch(self, owners: list[OwnerT], image_fields: dict[str, Any], id_factory: Callable[[], str]) -> None:
        # Owners of another family are skipped on batch paths
        self.repo.add_image_batch([o for o in owners if self._is_own(o)], image_fields, id_factory)

    def delete_image(self, owner: OwnerT, media_service_id: str) -> int:
        return self.repo.delete_image(self._own(owner), media_service_id)

    def delete_image_batch(self, owner_ids: list[str], media_service_id: str) -> int:
        return self.repo.delete_image_batch(owner_ids, media_service_id)

    def save(self, *owners: OwnerT) -> None:
        self.repo.save(*[o for o in owners if self._is_own(o)])

    def find_owner_ids_by_image_id(self, media_service_id: str, owner_ids: list[str]) -> list[str]:
        return self.repo.find_owner_ids_by_image_id(media_service_id, owner_ids)

    def decrement_image_count(self, owner_ids: list[str]) -> int:
        return self.repo.decrement_image_count(owner_ids)


class CoursePartOwnerAdapter(_RepositoryAdapter[OwnerT]):
    """Video owner capabilities over the course part repository."""

    repo: CoursePartRepository


def image_owners(database: PostgresConnection) -> dict[str, ImageOwnerRepo]:
    """Image owner adapters for every details family, keyed by owner type."""
    repos = [
        CourseRepository(database),
        TrainingSessionRepository(database),
        SeminarRepository(database),
        PhysicalGoodRepository(database),
    ]
    return {repo.model.owner_type: DetailsOwnerAdapter(repo) for repo in repos}


def video_owners(database: PostgresConnection) -> dict[str, VideoOwnerRepo]:
    """Video owner adapters: every details family plus course parts."""
    owners: dict[str, VideoOwnerRepo] = dict(image_owners(database))
    owners[CoursePart.owner_type] = CoursePartOwnerAdapter(CoursePartRepository(database))
    return owners
