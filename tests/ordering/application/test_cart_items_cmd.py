"""Application tests for cart line commands."""

import pytest
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, RemoveFromCart, SetCartQuantity
from ordering.cart.management import ClearCart, CreateCart
from protean import current_domain
from protean.exceptions import ValidationError


def _create_cart(**overrides):
    defaults = {"session_id": "sess-001"}
    defaults.update(overrides)
    return current_domain.process(CreateCart(**defaults), asynchronous=False)


def _add(cart_id, product_id="prod-001", quantity=1, current_stock=10):
    return current_domain.process(
        AddToCart(cart_id=cart_id, product_id=product_id, quantity=quantity, current_stock=current_stock),
        asynchronous=False,
    )


def _load(cart_id):
    return current_domain.repository_for(ShoppingCart).get(cart_id)


class TestCreateCartCommand:
    def test_create_cart_persists(self):
        cart_id = _create_cart()
        cart = _load(cart_id)
        assert cart.session_id == "sess-001"
        assert cart.is_empty()


class TestAddToCartCommand:
    def test_add_item_persists(self):
        cart_id = _create_cart()
        _add(cart_id, quantity=2)
        cart = _load(cart_id)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_add_clamps_to_stock(self):
        cart_id = _create_cart()
        _add(cart_id, quantity=5, current_stock=3)
        assert _load(cart_id).quantity_of("prod-001") == 3

    def test_add_same_product_increments(self):
        cart_id = _create_cart()
        _add(cart_id, quantity=1)
        _add(cart_id, quantity=3)
        cart = _load(cart_id)
        assert len(cart.items) == 1
        assert cart.quantity_of("prod-001") == 4

    def test_add_out_of_stock_rejected(self):
        cart_id = _create_cart()
        with pytest.raises(ValidationError):
            _add(cart_id, current_stock=0)
        assert _load(cart_id).is_empty()


class TestSetCartQuantityCommand:
    def test_set_quantity_persists(self):
        cart_id = _create_cart()
        _add(cart_id)
        current_domain.process(
            SetCartQuantity(cart_id=cart_id, product_id="prod-001", new_quantity=5, current_stock=10),
            asynchronous=False,
        )
        assert _load(cart_id).quantity_of("prod-001") == 5

    def test_set_quantity_to_zero_removes_line(self):
        cart_id = _create_cart()
        _add(cart_id)
        current_domain.process(
            SetCartQuantity(cart_id=cart_id, product_id="prod-001", new_quantity=0, current_stock=10),
            asynchronous=False,
        )
        assert _load(cart_id).is_empty()


class TestRemoveFromCartCommand:
    def test_remove_item_persists(self):
        cart_id = _create_cart()
        _add(cart_id)
        current_domain.process(RemoveFromCart(cart_id=cart_id, product_id="prod-001"), asynchronous=False)
        assert _load(cart_id).is_empty()

    def test_remove_absent_item_is_harmless(self):
        cart_id = _create_cart()
        _add(cart_id)
        current_domain.process(RemoveFromCart(cart_id=cart_id, product_id="prod-404"), asynchronous=False)
        assert _load(cart_id).quantity_of("prod-001") == 1


class TestClearCartCommand:
    def test_clear_cart_persists(self):
        cart_id = _create_cart()
        _add(cart_id, product_id="prod-001")
        _add(cart_id, product_id="prod-002")
        current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False)
        assert _load(cart_id).is_empty()
