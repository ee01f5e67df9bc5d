"""Integration tests for the CreateProduct use case."""

import pytest

from catalog.application.create_product import CreateProductHandler
from catalog.application.dto import NewProductSpec
from catalog.application.show_product import ShowProductHandler
from catalog.domain.exceptions import ValidationError
from tests.fakes import FakeProductRepository


class TestCreateProductHappyPath:

    def test_creates_and_persists(self):
        repo = FakeProductRepository()
        handler = CreateProductHandler(repo)

        product = handler.handle(
            NewProductSpec(name="Widget", price=15.0, category="Tools", stock=4)
        )

        assert product.is_active is True
        assert product.stock == 4
        assert repo.list_all() == [product]
        assert repo.persist_count == 1

    def test_ids_are_unique_and_stable(self):
        repo = FakeProductRepository()
        handler = CreateProductHandler(repo)

        created = [
            handler.handle(NewProductSpec(name=f"Item {i}", price=1.0, category="Misc"))
            for i in range(10)
        ]

        assert len({p.id for p in created}) == 10
        show = ShowProductHandler(repo)
        for p in created:
            assert show.handle(p.id).id == p.id


class TestCreateProductValidation:

    def test_negative_price_rejected_without_persisting(self):
        repo = FakeProductRepository()
        handler = CreateProductHandler(repo)

        with pytest.raises(ValidationError, match="Price") as exc_info:
            handler.handle(NewProductSpec(name="Widget", price=-10, category="Tools"))

        assert exc_info.value.violations == ["Price must be a non-negative number"]
        assert repo.list_all() == []
        assert repo.persist_count == 0

    def test_all_violations_are_reported(self):
        handler = CreateProductHandler(FakeProductRepository())

        with pytest.raises(ValidationError) as exc_info:
            handler.handle(
                NewProductSpec(name="W", price=-1, category="T", image_url="bad")
            )

        assert len(exc_info.value.violations) == 4
        assert str(exc_info.value).startswith("Validation errors: ")
