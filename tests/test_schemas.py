"""
Tests for the form validation rules on catalog entities.
"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront_api.schemas.bundle import BundleCreate
from storefront_api.schemas.category import CategoryCreate
from storefront_api.schemas.pc_build import PCBuildCreate
from storefront_api.schemas.product import ProductCreate, ProductOut, ProductUpdate, SpecEntry, specs_to_mapping
from storefront_api.schemas.promotion import PromotionCreate


def _errors(exc: ValidationError) -> dict:
    return {err["loc"][0] if err["loc"] else "__root__": err["msg"] for err in exc.errors()}


class TestProductCreate:

    def test_valid_fields(self, product_fields):
        data = ProductCreate.model_validate(product_fields)
        assert data.price == Decimal("139.99")
        assert data.specs == [
            SpecEntry(key="Wattage", value=850),
            SpecEntry(key="Modular", value=True),
            SpecEntry(key="Rating", value="80+ Gold"),
        ]

    @pytest.mark.parametrize("field,value,message", [
        ("name", "ab", "Product name must be at least 3 characters."),
        ("description", "too short", "Description must be at least 10 characters."),
        ("price", 0, "Price must be a positive number."),
        ("price", -5, "Price must be a positive number."),
        ("category_id", "", "Please select a category."),
        ("stock", -1, "Stock must be a non-negative integer."),
        ("brand", "", "Brand is required."),
        ("sku", "AB", "SKU must be at least 3 characters."),
        ("discount_percent", 101, "Discount must be between 0 and 100."),
        ("discount_percent", -1, "Discount must be between 0 and 100."),
    ])
    def test_field_rules(self, product_fields, field, value, message):
        product_fields[field] = value
        with pytest.raises(ValidationError) as exc:
            ProductCreate.model_validate(product_fields)
        assert message in _errors(exc.value)[field]

    def test_stock_must_be_integer(self, product_fields):
        product_fields["stock"] = 2.5
        with pytest.raises(ValidationError):
            ProductCreate.model_validate(product_fields)

    def test_numeric_strings_are_coerced(self, product_fields):
        product_fields.update(price="99.50", stock="4", discount_percent="15")
        data = ProductCreate.model_validate(product_fields)
        assert (data.price, data.stock, data.discount_percent) == (99.5, 4, 15)

    @pytest.mark.parametrize("value", ["inf", "-inf", "NaN", "Infinity"])
    def test_non_finite_price_rejected(self, product_fields, value):
        product_fields["price"] = value
        with pytest.raises(ValidationError) as exc:
            ProductCreate.model_validate(product_fields)
        assert "price" in _errors(exc.value)

    def test_non_finite_discount_rejected(self, product_fields):
        product_fields["discount_percent"] = "NaN"
        with pytest.raises(ValidationError) as exc:
            ProductCreate.model_validate(product_fields)
        assert "discount_percent" in _errors(exc.value)

    @pytest.mark.parametrize("field,value", [
        ("price", 19.999),
        ("price", "123456789.00"),
        ("discount_percent", 12.345),
    ])
    def test_values_must_fit_store_precision(self, product_fields, field, value):
        product_fields[field] = value
        with pytest.raises(ValidationError) as exc:
            ProductCreate.model_validate(product_fields)
        assert field in _errors(exc.value)

    def test_update_price_precision(self):
        with pytest.raises(ValidationError):
            ProductUpdate.model_validate({"price": "inf"})
        with pytest.raises(ValidationError):
            ProductUpdate.model_validate({"price": 0.001})

    def test_images_must_be_strings(self, product_fields):
        product_fields["images"] = ["https://ok.example.com/a.png", 42]
        with pytest.raises(ValidationError):
            ProductCreate.model_validate(product_fields)

    def test_boundary_discounts_accepted(self, product_fields):
        for value in (0, 100):
            product_fields["discount_percent"] = value
            assert ProductCreate.model_validate(product_fields).discount_percent == value


class TestSpecs:

    def test_list_form_keeps_order(self, product_fields):
        product_fields["specs"] = [{"key": "B", "value": 1}, {"key": "A", "value": "x"}]
        data = ProductCreate.model_validate(product_fields)
        assert list(specs_to_mapping(data.specs)) == ["B", "A"]

    def test_nested_values_rejected(self, product_fields):
        product_fields["specs"] = {"Ports": {"usb": 4}}
        with pytest.raises(ValidationError):
            ProductCreate.model_validate(product_fields)

    def test_list_values_rejected(self, product_fields):
        product_fields["specs"] = {"Ports": ["usb", "hdmi"]}
        with pytest.raises(ValidationError):
            ProductCreate.model_validate(product_fields)

    def test_duplicate_keys_rejected(self, product_fields):
        product_fields["specs"] = [{"key": "Cores", "value": 6}, {"key": "Cores", "value": 8}]
        with pytest.raises(ValidationError, match="Duplicate specification key"):
            ProductCreate.model_validate(product_fields)

    def test_value_types_not_coerced(self, product_fields):
        product_fields["specs"] = {"Unlocked": True, "Cores": 6, "Boost": 4.6}
        entries = ProductCreate.model_validate(product_fields).specs
        assert [type(e.value) for e in entries] == [bool, int, float]

    def test_out_schema_reads_mapping(self):
        out = ProductOut(
            id="p1", name="Thing", description="A long description", price=10, category_id="c",
            stock=1, brand="B", sku="SKU1", specs={"Cores": 6},
        )
        assert out.specs == [SpecEntry(key="Cores", value=6)]


class TestProductUpdate:

    def test_partial_update_only_sets_given_fields(self):
        data = ProductUpdate.model_validate({"price": 75})
        assert data.model_fields_set == {"price"}

    def test_rules_apply_to_given_fields(self):
        with pytest.raises(ValidationError, match="SKU must be at least 3 characters."):
            ProductUpdate.model_validate({"sku": "X"})

    def test_explicit_null_rejected_for_required_column(self):
        with pytest.raises(ValidationError, match="name cannot be null"):
            ProductUpdate.model_validate({"name": None})

    def test_discount_may_be_cleared(self):
        data = ProductUpdate.model_validate({"discount_percent": None})
        assert data.discount_percent is None


class TestOtherEntities:

    def test_category_slug_must_be_url_safe(self):
        with pytest.raises(ValidationError):
            CategoryCreate(name="Graphics Cards", slug="Graphics Cards")

    def test_category_slug_derived_from_name(self):
        assert CategoryCreate(name="Graphics Cards & GPUs").resolved_slug() == "graphics-cards-gpus"

    def test_promotion_needs_a_discount(self):
        with pytest.raises(ValidationError, match="discount percent or a discount amount"):
            PromotionCreate(
                name="Nothing", code="NONE", start_date=datetime(2026, 1, 1, tzinfo=timezone.utc),
                end_date=datetime(2026, 2, 1, tzinfo=timezone.utc),
            )

    def test_promotion_date_range(self):
        with pytest.raises(ValidationError, match="end_date"):
            PromotionCreate(
                name="Backwards", code="BACK", discount_percent=5,
                start_date=datetime(2026, 2, 1, tzinfo=timezone.utc),
                end_date=datetime(2026, 1, 1, tzinfo=timezone.utc),
            )

    def test_promotion_dates_normalized_to_utc(self):
        promotion = PromotionCreate(
            name="Mixed", code="MIXED", discount_percent=5,
            start_date="2026-01-01T00:00:00", end_date=datetime(2026, 1, 2, 2, tzinfo=timezone.utc),
        )
        assert promotion.start_date == datetime(2026, 1, 1, tzinfo=timezone.utc)
        assert promotion.start_date.tzinfo is not None

    def test_promotion_percent_range(self):
        with pytest.raises(ValidationError):
            PromotionCreate(
                name="Too much", code="MUCH", discount_percent=150,
                start_date=datetime(2026, 1, 1, tzinfo=timezone.utc),
                end_date=datetime(2026, 2, 1, tzinfo=timezone.utc),
            )

    def test_bundle_needs_products(self):
        with pytest.raises(ValidationError):
            BundleCreate(name="Empty", description="Nothing inside", products=[])

    def test_build_needs_components(self):
        with pytest.raises(ValidationError, match="at least one component"):
            PCBuildCreate(name="Empty build", components={})
