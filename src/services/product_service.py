"""Read-only access to products across all details families."""

from src.config import DEFAULT_PAGE_LIMIT
from src.db.postgres_client import PostgresConnection, db
from src.models.products import DETAILS_TYPES
from src.repositories import ProductRepository
from src.schemas.common import ListResponse
from src.schemas.product import ProductOut
from src.services.errors import InvalidArgumentError, NotFoundError, translate_errors
from src.services.lifecycle_service import check_page
from src.utils.validation import ensure_uuid


class ProductService:
    def __init__(self, database: PostgresConnection = db):
        self.db = database
        self.product_repo = ProductRepository(database)

    @staticmethod
    def _check_details_type(details_type: str) -> str:
        if details_type not in DETAILS_TYPES:
            raise InvalidArgumentError(f"Unknown details type: {details_type}")
        return details_type

    def _get(self, getter: str, *args) -> ProductOut:
        with self.db.transaction() as session:
            product_repo = self.product_repo.with_tx(session)
            with translate_errors("Failed to get product"):
                product = getattr(product_repo, getter)(*args)
            if product is None:
                raise NotFoundError("Product not found")
            return ProductOut.model_validate(product)

    def get(self, id: str) -> ProductOut:
        return self._get("get", ensure_uuid(id, "product"))

    def get_with_unpublished(self, id: str) -> ProductOut:
        return self._get("get_with_unpublished", ensure_uuid(id, "product"))

    def get_with_deleted(self, id: str) -> ProductOut:
        return self._get("get_with_deleted", ensure_uuid(id, "product"))

    def get_by_details_id(self, details_id: str, details_type: str) -> ProductOut:
        """Get the published product paired with a details row."""
        ensure_uuid(details_id, "details")
        return self._get("get_by_details_id", details_id, self._check_details_type(details_type))

    def list(
        self, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0, details_type: str | None = None
    ) -> ListResponse[ProductOut]:
        """List published products, optionally of one details family."""
        limit, offset = check_page(limit, offset)

        with self.db.transaction() as session:
            product_repo = self.product_repo.with_tx(session)
            with translate_errors("Failed to list products"):
                if details_type is None:
                    rows = product_repo.list(limit, offset)
                    total = product_repo.count()
                else:
                    self._check_details_type(details_type)
                    rows = product_repo.list_by_details_type(details_type, limit, offset)
                    total = product_repo.count_by_details_type(details_type)
            items = [ProductOut.model_validate(row) for row in rows]

        return ListResponse[ProductOut](items=items, total=total)


# Singleton instance
product_service = ProductService()
