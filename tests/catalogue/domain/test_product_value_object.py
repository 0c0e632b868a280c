"""Tests for the Product value object and stock badges."""

import pytest
from catalogue.product.product import (
    LOW_STOCK_THRESHOLD,
    Product,
    ProductCategory,
    StockStatus,
    index_by_id,
    stock_status,
)
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields


def _product(**overrides):
    data = {
        "product_id": "prod-001",
        "name": "Noise Cancelling Headphones",
        "description": "Over-ear, wireless",
        "category": ProductCategory.ELECTRONICS.value,
        "price": 199.99,
        "stock": 12,
    }
    data.update(overrides)
    return Product(**data)


class TestProductConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Product.element_type == DomainObjects.VALUE_OBJECT

    def test_declared_fields(self):
        fields = declared_fields(Product)
        for name in ("product_id", "name", "description", "category", "price", "stock", "rating", "review_count"):
            assert name in fields

    def test_valid_product(self):
        product = _product()
        assert product.product_id == "prod-001"
        assert product.price == 199.99
        assert product.stock == 12

    def test_defaults(self):
        product = Product(product_id="prod-002", name="Mug", category="Home & Garden", price=8.5)
        assert product.stock == 0
        assert product.rating is None
        assert product.review_count == 0

    def test_zero_price_is_valid(self):
        assert _product(price=0.0).price == 0.0

    def test_rating_bounds_are_inclusive(self):
        assert _product(rating=0.0).rating == 0.0
        assert _product(rating=5.0).rating == 5.0

    @pytest.mark.parametrize("category", [c.value for c in ProductCategory])
    def test_all_categories_accepted(self, category):
        assert _product(category=category).category == category


class TestProductInvariants:
    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _product(price=-0.01)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            _product(stock=-1)

    def test_rating_above_five_rejected(self):
        with pytest.raises(ValidationError):
            _product(rating=5.5)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            _product(category="Garden Gnomes")

    def test_category_is_case_sensitive(self):
        with pytest.raises(ValidationError):
            _product(category="books")

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            Product(product_id="prod-003", category="Books", price=1.0)

    def test_blank_product_id_rejected(self):
        with pytest.raises(ValidationError):
            _product(product_id="   ")


class TestStockStatus:
    def test_out_of_stock(self):
        assert stock_status(_product(stock=0)) == StockStatus.OUT_OF_STOCK

    def test_low_stock_below_threshold(self):
        assert stock_status(_product(stock=1)) == StockStatus.LOW_STOCK
        assert stock_status(_product(stock=LOW_STOCK_THRESHOLD - 1)) == StockStatus.LOW_STOCK

    def test_in_stock_at_threshold(self):
        assert stock_status(_product(stock=LOW_STOCK_THRESHOLD)) == StockStatus.IN_STOCK


class TestIndexById:
    def test_maps_ids_to_products(self):
        first = _product(product_id="a")
        second = _product(product_id="b")
        assert index_by_id([first, second]) == {"a": first, "b": second}

    def test_empty(self):
        assert index_by_id([]) == {}


class TestProductTextIsVerbatim:
    def test_ampersand_in_name_is_not_escaped(self):
        assert _product(name="Salt & Pepper").name == "Salt & Pepper"

    def test_markup_in_description_is_not_escaped(self):
        product = _product(description="<b>Bold</b> & bright")
        assert product.description == "<b>Bold</b> & bright"

    def test_home_and_garden_category_round_trips(self):
        product = _product(category=ProductCategory.HOME_AND_GARDEN.value)
        assert product.category == "Home & Garden"

    def test_image_url_with_query_string(self):
        url = "https://cdn.example.com/p.png?w=200&h=200"
        assert _product(image_url=url).image_url == url
