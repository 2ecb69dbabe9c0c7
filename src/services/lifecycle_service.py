"""Product/details pair lifecycle shared by every sellable family."""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from src.config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from src.db.postgres_client import PostgresConnection, db
from src.models import Product
from src.repositories import DetailsRepository, ProductRepository
from src.schemas.common import CreateResponse, DetailsOut, ListResponse, as_utc
from src.services.errors import InvalidArgumentError, NotFoundError, translate_errors
from src.utils.validation import ensure_uuid, new_id, validate_request

logger = logging.getLogger(__name__)

DetailsT = TypeVar("DetailsT")

# Repository getters for each read scope: (details getter, product getter)
_GETTERS = {
    "published": ("get", "get_by_details_id"),
    "with_unpublished": ("get_with_unpublished", "get_with_unpublished_by_details_id"),
    "with_deleted": ("get_with_deleted", "get_with_deleted_by_details_id"),
}
_LISTERS = {
    "published": ("list", "count"),
    "unpublished": ("list_unpublished", "count_unpublished"),
    "deleted": ("list_deleted", "count_deleted"),
}


def check_page(limit: int, offset: int) -> tuple[int, int]:
    if limit < 1 or limit > MAX_PAGE_LIMIT:
        raise InvalidArgumentError(f"limit must be between 1 and {MAX_PAGE_LIMIT}")
    if offset < 0:
        raise InvalidArgumentError("offset must not be negative")
    return limit, offset


class LifecycleService(ABC, Generic[DetailsT]):
    """
    Keeps a details row and its product row in lockstep.

    Every write opens one transaction, binds both repositories to it and
    either commits both rows or neither. Subclasses declare their details
    family and implement ``_build_details``; families with dependent rows
    hook into the lifecycle through ``_cascade``.
    """

    details_type: str
    label: str
    repository_class: type[DetailsRepository]
    create_request: type[BaseModel]
    update_request: type[BaseModel]
    details_schema: type[DetailsOut]
    # Details columns an update request may change
    update_fields: tuple[str, ...] = ("name", "short_description", "long_description", "tags")

    def __init__(self, database: PostgresConnection = db):
        self.db = database
        self.details_repo = self.repository_class(database)
        self.product_repo = ProductRepository(database)

    @property
    def title(self) -> str:
        return self.label.capitalize()

    def _bind(self, session: Session) -> tuple[DetailsRepository, ProductRepository]:
        return self.details_repo.with_tx(session), self.product_repo.with_tx(session)

    @abstractmethod
    def _build_details(self, req: BaseModel) -> DetailsT:
        """Build the unsaved details row for a validated create request."""

    def _cascade(self, session: Session, action: str, id: str) -> None:
        """Propagate a lifecycle action to rows that depend on the details row."""

    def _to_details(self, details: DetailsT, product: Product, scope: str) -> DetailsOut:
        payload = {
            name: getattr(details, name)
            for name in self.details_schema.model_fields
            if hasattr(details, name)
        }
        payload.update(price=product.price, product_id=product.id)
        return self.details_schema.model_validate(payload, from_attributes=True)

    # Reads

    def get(self, id: str) -> DetailsOut:
        """Get a published, not deleted item."""
        return self._get(id, "published")

    def get_with_unpublished(self, id: str) -> DetailsOut:
        return self._get(id, "with_unpublished")

    def get_with_deleted(self, id: str) -> DetailsOut:
        return self._get(id, "with_deleted")

    def _get(self, id: str, scope: str) -> DetailsOut:
        ensure_uuid(id, self.label)
        details_getter, product_getter = _GETTERS[scope]

        with self.db.transaction() as session:
            details_repo, product_repo = self._bind(session)
            with translate_errors(f"Failed to get {self.label}"):
                details = getattr(details_repo, details_getter)(id)
                if details is None:
                    raise NotFoundError(f"{self.title} not found")
                product = getattr(product_repo, product_getter)(id, self.details_type)
            if product is None:
                raise NotFoundError(f"{self.title} product not found")
            return self._to_details(details, product, scope)

    def list(self, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0) -> ListResponse:
        return self._list("published", limit, offset)

    def list_unpublished(self, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0) -> ListResponse:
        return self._list("unpublished", limit, offset)

    def list_deleted(self, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0) -> ListResponse:
        return self._list("deleted", limit, offset)

    def _list(self, scope: str, limit: int, offset: int) -> ListResponse:
        limit, offset = check_page(limit, offset)
        lister, counter = _LISTERS[scope]
        dto_scope = "with_deleted" if scope == "deleted" else scope

        with self.db.transaction() as session:
            details_repo, product_repo = self._bind(session)
            with translate_errors(f"Failed to list {self.label}s"):
                rows = getattr(details_repo, lister)(limit, offset)
                total = getattr(details_repo, counter)()
                products = {
                    p.details_id: p
                    for p in product_repo.select_by_details_ids([r.id for r in rows], self.details_type)
                }
            items = []
            for r in rows:
                if r.id not in products:
                    logger.error(f"{self.title} {r.id} has no product; left out of the listing")
                    continue
                items.append(self._to_details(r, products[r.id], dto_scope))

        return ListResponse[self.details_schema](items=items, total=total)

    # Writes

    def create(self, req: BaseModel | dict[str, Any]) -> CreateResponse:
        """
        Create an unpublished details row and its product.

        Args:
            req: Create request model or its dict form

        Returns:
            IDs of the new details row and product
        """
        req = validate_request(self.create_request, req)
        details = self._build_details(req)
        product = Product(
            id=new_id(),
            price=req.price,
            details_id=details.id,
            details_type=self.details_type,
            in_stock=False,
        )

        with self.db.transaction() as session:
            details_repo, product_repo = self._bind(session)
            with translate_errors(f"Failed to create {self.label}"):
                details_repo.create(details)
            with translate_errors(f"Failed to create {self.label} product"):
                product_repo.create(product)

        logger.info(f"Created {self.label} {details.id} with product {product.id}")
        return CreateResponse(id=details.id, product_id=product.id)

    def publish(self, id: str) -> None:
        self._set_in_stock(id, True)

    def unpublish(self, id: str) -> None:
        self._set_in_stock(id, False)

    def _set_in_stock(self, id: str, in_stock: bool) -> None:
        ensure_uuid(id, self.label)
        verb = "publish" if in_stock else "unpublish"

        with self.db.transaction() as session:
            details_repo, product_repo = self._bind(session)
            with translate_errors(f"Failed to {verb} {self.label}"):
                affected = details_repo.set_in_stock(id, in_stock)
            if not affected:
                raise NotFoundError(f"{self.title} not found")

            with translate_errors(f"Failed to {verb} {self.label} product"):
                affected = product_repo.set_in_stock_by_details_id(id, self.details_type, in_stock)
            if not affected:
                raise NotFoundError(f"{self.title} product not found")

            if not in_stock:
                self._cascade(session, "unpublish", id)

        logger.info(f"{verb.capitalize()}ed {self.label} {id}")

    def update(self, req: BaseModel | dict[str, Any]) -> dict[str, dict[str, Any]]:
        """
        Apply the fields of an update request that differ from the stored values.

        Returns:
            {"details": {...}, "product": {...}} with exactly the fields written.
            Both maps are empty when nothing changed.
        """
        req = validate_request(self.update_request, req)

        with self.db.transaction() as session:
            details_repo, product_repo = self._bind(session)
            with translate_errors(f"Failed to get {self.label}"):
                details = details_repo.get_with_unpublished(req.id, for_update=True)
            if details is None:
                raise NotFoundError(f"{self.title} not found")

            with translate_errors(f"Failed to get {self.label} product"):
                product = product_repo.get_with_unpublished_by_details_id(req.id, self.details_type, for_update=True)
            if product is None:
                raise NotFoundError(f"{self.title} product not found")

            details_updates = self._details_updates(req, details)
            product_updates = {}
            if req.price is not None and req.price != product.price:
                product_updates["price"] = req.price

            if product_updates:
                with translate_errors(f"Failed to update {self.label} product"):
                    product_repo.update(product, product_updates)
            if details_updates:
                with translate_errors(f"Failed to update {self.label}"):
                    details_repo.update(details, details_updates)

        if details_updates or product_updates:
            logger.info(f"Updated {self.label} {req.id}: {sorted(details_updates) + sorted(product_updates)}")
        return {"details": details_updates, "product": product_updates}

    def _details_updates(self, req: BaseModel, details: DetailsT) -> dict[str, Any]:
        updates = {}
        for field in self.update_fields:
            value = getattr(req, field, None)
            if value is None:
                continue
            if _comparable(value) != _comparable(getattr(details, field)):
                updates[field] = value
        return updates

    def delete(self, id: str) -> None:
        """Unpublish the pair, then soft delete both rows."""
        ensure_uuid(id, self.label)

        with self.db.transaction() as session:
            details_repo, product_repo = self._bind(session)
            with translate_errors(f"Failed to get {self.label}"):
                details = details_repo.get_with_unpublished(id, for_update=True)
            if details is None:
                raise NotFoundError(f"{self.title} not found")

            with translate_errors(f"Failed to unpublish {self.label}"):
                details_repo.set_in_stock(id, False)
            with translate_errors(f"Failed to unpublish {self.label} product"):
                affected = product_repo.set_in_stock_by_details_id(id, self.details_type, False)
            if not affected:
                raise NotFoundError(f"{self.title} product not found")
            self._cascade(session, "unpublish", id)

            with translate_errors(f"Failed to delete {self.label}"):
                details_repo.soft_delete(id)
            with translate_errors(f"Failed to delete {self.label} product"):
                product_repo.soft_delete_by_details_id(id, self.details_type)
            self._cascade(session, "delete", id)

        logger.info(f"Deleted {self.label} {id}")

    def delete_permanent(self, id: str) -> None:
        """Remove an unpublished or soft-deleted pair for good, images included."""
        ensure_uuid(id, self.label)

        with self.db.transaction() as session:
            details_repo, product_repo = self._bind(session)
            with translate_errors(f"Failed to delete {self.label} permanently"):
                affected = details_repo.delete_permanent(id)
            if not affected:
                raise NotFoundError(f"{self.title} not found")

            with translate_errors(f"Failed to delete {self.label} product permanently"):
                affected = product_repo.delete_permanent_by_details_id(id, self.details_type)
            if not affected:
                raise NotFoundError(f"{self.title} product not found")
            self._cascade(session, "purge", id)

        logger.info(f"Permanently deleted {self.label} {id}")

    def restore(self, id: str) -> None:
        """Clear the soft-delete mark on both rows; the pair stays unpublished."""
        ensure_uuid(id, self.label)

        with self.db.transaction() as session:
            details_repo, product_repo = self._bind(session)
            with translate_errors(f"Failed to restore {self.label}"):
                affected = details_repo.restore(id)
            if not affected:
                raise NotFoundError(f"{self.title} not found")

            with translate_errors(f"Failed to restore {self.label} product"):
                affected = product_repo.restore_by_details_id(id, self.details_type)
            if not affected:
                raise NotFoundError(f"{self.title} product not found")
            self._cascade(session, "restore", id)

        logger.info(f"Restored {self.label} {id}")


def _comparable(value: Any) -> Any:
    if isinstance(value, datetime):
        return as_utc(value)
    return value
