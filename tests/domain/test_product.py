"""Unit tests for the Product entity."""

from datetime import datetime, timedelta, timezone

import pytest

from catalog.domain.model import product as product_module
from catalog.domain.model.product import Product, is_valid_url
from catalog.domain.model.value_objects import ProductChanges


def _product(**overrides) -> Product:
    fields = {"name": "Widget", "price": 15.0, "category": "Tools"}
    fields.update(overrides)
    return Product(**fields)


# ── Construction ─────────────────────────────────────────────────────────────


class TestConstruction:

    def test_defaults(self):
        p = _product()
        assert p.description == ""
        assert p.stock == 0
        assert p.image_url == ""
        assert p.is_active is True
        assert p.created_at == p.updated_at
        assert p.created_at.tzinfo is not None

    def test_generates_unique_ids(self):
        ids = {_product().id for _ in range(50)}
        assert len(ids) == 50

    def test_keeps_supplied_id_and_timestamps(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        p = _product(id="abc", created_at=created)
        assert p.id == "abc"
        assert p.created_at == created
        assert p.updated_at == created

    def test_invalid_product_can_be_constructed(self):
        p = _product(name="x", price=-1)
        assert p.validate()


# ── Partial update ───────────────────────────────────────────────────────────


class TestApplyUpdate:

    def test_only_supplied_fields_change(self):
        p = _product(description="old", stock=3)
        p.apply_update(ProductChanges(stock=10))
        assert p.stock == 10
        assert p.description == "old"
        assert p.name == "Widget"

    def test_empty_update_only_refreshes_timestamp(self):
        p = _product(created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
        before = {k: v for k, v in vars(p).items() if k != "updated_at"}
        previous_updated = p.updated_at

        p.apply_update(ProductChanges())

        after = {k: v for k, v in vars(p).items() if k != "updated_at"}
        assert after == before
        assert p.updated_at > previous_updated

    def test_updated_at_never_goes_backwards(self, monkeypatch):
        future = datetime.now(timezone.utc) + timedelta(days=1)
        p = _product(created_at=future)
        p.apply_update(ProductChanges(name="Gadget"))
        assert p.updated_at == future

        monkeypatch.setattr(product_module, "utcnow", lambda: future - timedelta(hours=1))
        p.apply_update(ProductChanges())
        assert p.updated_at == future

    def test_with_changes_leaves_original_untouched(self):
        p = _product()
        proposed = p.with_changes(ProductChanges(price=99.0, name="Gadget"))
        assert proposed.price == 99.0
        assert proposed.name == "Gadget"
        assert proposed.id == p.id
        assert p.price == 15.0
        assert p.name == "Widget"

    def test_deactivate(self):
        p = _product()
        previous_updated = p.updated_at
        p.deactivate()
        assert p.is_active is False
        assert p.updated_at >= previous_updated


# ── Validation ───────────────────────────────────────────────────────────────


class TestValidate:

    def test_valid_product(self):
        assert _product(image_url="https://example.com/a.jpg").validate() == []

    def test_zero_price_is_valid(self):
        assert _product(price=0.0).validate() == []

    def test_negative_price(self):
        violations = _product(price=-10).validate()
        assert violations == ["Price must be a non-negative number"]

    def test_missing_price(self):
        assert "Price must be a non-negative number" in _product(price=None).validate()

    @pytest.mark.parametrize("price", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_price(self, price):
        assert _product(price=price).validate() == ["Price must be a non-negative number"]

    def test_reports_every_violation(self):
        p = _product(name="W", price=-1, category="", stock=-5, image_url="not a url")
        violations = p.validate()
        assert len(violations) == 5
        assert any("Name" in v for v in violations)
        assert any("Category" in v for v in violations)
        assert any("Stock" in v for v in violations)
        assert any("Image URL" in v for v in violations)

    def test_name_is_stripped_before_length_check(self):
        assert any("Name" in v for v in _product(name="  a  ").validate())

    def test_upper_bounds(self):
        violations = _product(
            name="n" * 101, category="c" * 51, description="d" * 501
        ).validate()
        assert len(violations) == 3

    def test_empty_image_url_is_allowed(self):
        assert _product(image_url="").validate() == []


class TestIsValidUrl:

    @pytest.mark.parametrize(
        "value", ["https://example.com/x.jpg", "http://localhost:3000/img"]
    )
    def test_absolute_urls(self, value):
        assert is_valid_url(value)

    @pytest.mark.parametrize("value", ["example.com/x.jpg", "/images/x.jpg", "nope"])
    def test_rejects_relative_or_garbage(self, value):
        assert not is_valid_url(value)
