"""Repositories for the details families that pair with a product."""

from __future__ import annotations

from typing import Any, TypeVar

from src.models import Course, Image, PhysicalGood, Seminar, TrainingSession
from src.repositories.base import Repository

DetailsT = TypeVar("DetailsT", Course, TrainingSession, Seminar, PhysicalGood)


class DetailsRepository(Repository[DetailsT]):
    """
    Data access for one details model.

    Besides the lifecycle writes, it owns the polymorphic image rows and the
    video reference of its model, keyed by ``model.owner_type``.
    """

    def get(self, id: str) -> DetailsT | None:
        return self._get(id, "published")

    def get_with_unpublished(self, id: str, for_update: bool = False) -> DetailsT | None:
        return self._get(id, "with_unpublished", for_update)

    def get_with_deleted(self, id: str) -> DetailsT | None:
        return self._get(id, "with_deleted")

    def select_fields(self, id: str, *fields: str):
        """Load only the named columns of a not soft-deleted row."""
        columns = [getattr(self.model, field) for field in fields]
        return (
            self.session.query(*columns)
            .filter(self.model.id == id, self.model.deleted_at.is_(None))
            .first()
        )

    def list(self, limit: int, offset: int) -> list[DetailsT]:
        return self._list("published", limit, offset)

    def count(self) -> int:
        return self._count("published")

    def list_unpublished(self, limit: int, offset: int) -> list[DetailsT]:
        return self._list("unpublished", limit, offset)

    def count_unpublished(self) -> int:
        return self._count("unpublished")

    def list_deleted(self, limit: int, offset: int) -> list[DetailsT]:
        return self._list("deleted", limit, offset)

    def count_deleted(self) -> int:
        return self._count("deleted")

    def list_with_unpublished_by_ids(self, ids: list[str], for_update: bool = False) -> list[DetailsT]:
        if not ids:
            return []
        query = self._query("with_unpublished").filter(self.model.id.in_(ids))
        if for_update:
            query = query.with_for_update()
        return query.all()

    def set_in_stock(self, id: str, in_stock: bool) -> int:
        return self._query("with_unpublished").filter(self.model.id == id).update({"in_stock": in_stock})

    def soft_delete(self, id: str) -> int:
        return self._query("with_unpublished").filter(self.model.id == id).update({"deleted_at": self._now()})

    def restore(self, id: str) -> int:
        return self._query("deleted").filter(self.model.id == id).update({"deleted_at": None})

    def delete_permanent(self, id: str) -> int:
        """Delete an unpublished (or soft-deleted) row together with its images."""
        affected = self._query("with_deleted").filter(self.model.id == id, self.model.in_stock.is_(False)).delete()
        if affected:
            self._images([id]).delete()
        return affected

    # Media

    def _images(self, owner_ids: list[str]):
        return self.session.query(Image).filter(
            Image.owner_id.in_(owner_ids), Image.owner_type == self.model.owner_type
        )

    def add_image(self, owner: DetailsT, image: Image) -> None:
        image.owner_id = owner.id
        image.owner_type = self.model.owner_type
        self.session.add(image)
        self.session.flush()
        self.session.expire(owner, ["images"])

    def add_image_batch(self, owners: list[DetailsT], image_fields: dict[str, Any], id_factory) -> None:
        for owner in owners:
            self.session.add(
                Image(id=id_factory(), owner_id=owner.id, owner_type=self.model.owner_type, **image_fields)
            )
        self.session.flush()
        for owner in owners:
            self.session.expire(owner, ["images"])

    def delete_image(self, owner: DetailsT, media_service_id: str) -> int:
        affected = self._images([owner.id]).filter(Image.media_service_id == media_service_id).delete()
        self.session.expire(owner, ["images"])
        return affected

    def delete_image_batch(self, owner_ids: list[str], media_service_id: str) -> int:
        if not owner_ids:
            return 0
        return self._images(owner_ids).filter(Image.media_service_id == media_service_id).delete()

    def find_owner_ids_by_image_id(self, media_service_id: str, owner_ids: list[str]) -> list[str]:
        rows = (
            self.session.query(Image.owner_id)
            .filter(
                Image.media_service_id == media_service_id,
                Image.owner_type == self.model.owner_type,
                Image.owner_id.in_(owner_ids),
            )
            .all()
        )
        return [row.owner_id for row in rows]

    def decrement_image_count(self, owner_ids: list[str]) -> int:
        if not owner_ids:
            return 0
        return (
            self._query("with_deleted")
            .filter(self.model.id.in_(owner_ids), self.model.uploaded_image_amount > 0)
            .update({"uploaded_image_amount": self.model.uploaded_image_amount - 1}, synchronize_session="fetch")
        )

    def update_video_id(self, owner_id: str, video_id: str | None) -> int:
        return self._query("with_unpublished").filter(self.model.id == owner_id).update({"video_id": video_id})


class CourseRepository(DetailsRepository[Course]):
    model = Course


class TrainingSessionRepository(DetailsRepository[TrainingSession]):
    model = TrainingSession


class SeminarRepository(DetailsRepository[Seminar]):
    model = Seminar


class PhysicalGoodRepository(DetailsRepository[PhysicalGood]):
    model = PhysicalGood
