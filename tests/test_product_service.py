"""Tests for ProductService."""

import pytest

from src.services.errors import InvalidArgumentError, NotFoundError


class TestProductService:
    @pytest.fixture
    def good(self, physical_good_service, physical_good_payload):
        return physical_good_service.create(physical_good_payload)

    def test_get_scopes(self, product_service, physical_good_service, good):
        with pytest.raises(NotFoundError):
            product_service.get(good.product_id)
        assert product_service.get_with_unpublished(good.product_id).details_id == good.id

        physical_good_service.delete(good.id)

        with pytest.raises(NotFoundError):
            product_service.get_with_unpublished(good.product_id)
        assert product_service.get_with_deleted(good.product_id).deleted_at is not None

    def test_get_by_details_id(self, product_service, physical_good_service, good):
        physical_good_service.publish(good.id)

        product = product_service.get_by_details_id(good.id, "physical_good")

        assert product.id == good.product_id
        assert product.in_stock is True

    def test_get_by_details_id_wrong_type(self, product_service, physical_good_service, good):
        physical_good_service.publish(good.id)

        with pytest.raises(NotFoundError):
            product_service.get_by_details_id(good.id, "course")
        with pytest.raises(InvalidArgumentError):
            product_service.get_by_details_id(good.id, "gift_card")

    def test_list_by_details_type(
        self, product_service, physical_good_service, course_service, good, course_payload
    ):
        course = course_service.create(course_payload)
        physical_good_service.publish(good.id)
        course_service.publish(course.id)

        assert product_service.list().total == 2
        courses = product_service.list(details_type="course")
        assert [item.details_id for item in courses.items] == [course.id]
