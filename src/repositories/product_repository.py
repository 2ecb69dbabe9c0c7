"""Product data access keyed by the paired details record."""

from __future__ import annotations

from src.models import Product
from src.repositories.base import Repository


class ProductRepository(Repository[Product]):
    model = Product

    def get(self, id: str) -> Product | None:
        return self._get(id, "published")

    def get_with_unpublished(self, id: str) -> Product | None:
        return self._get(id, "with_unpublished")

    def get_with_deleted(self, id: str) -> Product | None:
        return self._get(id, "with_deleted")

    def _by_details(self, scope: str, details_id: str, details_type: str):
        return self._query(scope).filter(Product.details_id == details_id, Product.details_type == details_type)

    def get_by_details_id(self, details_id: str, details_type: str) -> Product | None:
        return self._by_details("published", details_id, details_type).first()

    def get_with_unpublished_by_details_id(
        self, details_id: str, details_type: str, for_update: bool = False
    ) -> Product | None:
        query = self._by_details("with_unpublished", details_id, details_type)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def get_with_deleted_by_details_id(self, details_id: str, details_type: str) -> Product | None:
        return self._by_details("with_deleted", details_id, details_type).first()

    def select_by_details_ids(self, details_ids: list[str], details_type: str) -> list:
        """Return (id, price, details_id) rows for the given details, whatever their state."""
        if not details_ids:
            return []
        return (
            self.session.query(Product.id, Product.price, Product.details_id)
            .filter(Product.details_id.in_(details_ids), Product.details_type == details_type)
            .all()
        )

    def list(self, limit: int, offset: int) -> list[Product]:
        return self._list("published", limit, offset)

    def count(self) -> int:
        return self._count("published")

    def list_by_details_type(self, details_type: str, limit: int, offset: int) -> list[Product]:
        return (
            self._query("published")
            .filter(Product.details_type == details_type)
            .order_by(Product.created_at.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )

    def count_by_details_type(self, details_type: str) -> int:
        return self._query("published").filter(Product.details_type == details_type).count()

    def set_in_stock_by_details_id(self, details_id: str, details_type: str, in_stock: bool) -> int:
        return self._by_details("with_unpublished", details_id, details_type).update({"in_stock": in_stock})

    def soft_delete_by_details_id(self, details_id: str, details_type: str) -> int:
        return self._by_details("with_unpublished", details_id, details_type).update({"deleted_at": self._now()})

    def restore_by_details_id(self, details_id: str, details_type: str) -> int:
        return self._by_details("deleted", details_id, details_type).update({"deleted_at": None})

    def delete_permanent_by_details_id(self, details_id: str, details_type: str) -> int:
        return self._by_details("with_deleted", details_id, details_type).filter(Product.in_stock.is_(False)).delete()
