"""Unit tests for cart reservations."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from shopfront.domain.cart import Cart
from shopfront.domain.errors import (
    CartClosedError,
    ExpiredItemError,
    InsufficientStockError,
)
from shopfront.domain.items import non_perishable, shippable

TODAY = date(2026, 1, 10)


class TestReserve:
    """Tests for Cart.reserve()."""

    def test_reserve_decrements_stock(self):
        """A successful reservation takes stock from the item immediately."""
        cheese = shippable("Cheese", 100, 5, "0.2")
        cart = Cart()
        line = cart.reserve(cheese, 2, TODAY)
        assert line.reserved_quantity == 2
        assert cheese.available_quantity == 3

    def test_reserve_whole_stock(self):
        """Reserving exactly what is left drains stock to zero."""
        card = non_perishable("Scratch Card", 50, 4)
        Cart().reserve(card, 4, TODAY)
        assert card.available_quantity == 0

    def test_over_reserve_fails_and_keeps_stock(self):
        """Asking for more than is available raises and changes nothing."""
        cheese = shippable("Cheese", 100, 5, "0.2")
        cart = Cart()
        with pytest.raises(InsufficientStockError) as exc:
            cart.reserve(cheese, 10, TODAY)
        assert str(exc.value) == "Insufficient quantity for product: Cheese. Available: 5, Requested: 10"
        assert cheese.available_quantity == 5
        assert cart.is_empty()

    def test_reservations_add_up_across_lines(self):
        """Each reservation checks against what earlier lines left behind."""
        cheese = shippable("Cheese", 100, 5, "0.2")
        cart = Cart()
        cart.reserve(cheese, 3, TODAY)
        with pytest.raises(InsufficientStockError):
            cart.reserve(cheese, 3, TODAY)
        assert cheese.available_quantity == 2
        assert len(cart.lines()) == 1

    def test_expired_item_fails_and_keeps_stock(self):
        """Expired items cannot be reserved."""
        old = shippable("Expired Cheese", 100, 5, "0.2", date(2026, 1, 9))
        cart = Cart()
        with pytest.raises(ExpiredItemError) as exc:
            cart.reserve(old, 1, TODAY)
        assert str(exc.value) == "Cannot add expired product: Expired Cheese"
        assert old.available_quantity == 5
        assert cart.is_empty()

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_rejected(self, qty):
        """Quantities must be positive."""
        with pytest.raises(ValueError):
            Cart().reserve(shippable("TV", 500, 3, "5.0"), qty, TODAY)

    def test_non_integer_quantity_rejected(self):
        """Quantities must be whole units."""
        with pytest.raises(ValueError):
            Cart().reserve(shippable("TV", 500, 3, "5.0"), 1.5, TODAY)

    def test_closed_cart_rejects_reservations(self):
        """A checked-out cart takes no more items."""
        cart = Cart()
        cart.close()
        tv = shippable("TV", 500, 3, "5.0")
        with pytest.raises(CartClosedError):
            cart.reserve(tv, 1, TODAY)
        assert tv.available_quantity == 3


class TestCheck:
    """Cart.check() reports the error kind without raising."""

    def test_ok(self):
        assert Cart().check(shippable("TV", 500, 3, "5.0"), 3, TODAY) is None

    def test_returns_error_kind(self):
        err = Cart().check(shippable("TV", 500, 3, "5.0"), 4, TODAY)
        assert isinstance(err, InsufficientStockError)
        assert err.available == 3
        assert err.requested == 4


class TestViews:
    """Tests for the read-only cart views."""

    def test_lines_keep_insertion_order(self):
        """lines() preserves the order items were added in."""
        cart = Cart()
        for name in ("Cheese", "Biscuits", "Card"):
            cart.reserve(non_perishable(name, 10, 5), 1, TODAY)
        assert [l.item.name for l in cart.lines()] == ["Cheese", "Biscuits", "Card"]

    def test_lines_is_a_copy(self):
        """The returned sequence cannot change the cart."""
        cart = Cart()
        cart.reserve(non_perishable("Card", 10, 5), 1, TODAY)
        lines = cart.lines()
        assert isinstance(lines, tuple)
        assert len(cart.lines()) == 1

    def test_subtotal(self):
        """Subtotal sums unit price times quantity."""
        cart = Cart()
        cart.reserve(shippable("Cheese", 100, 5, "0.2"), 2, TODAY)
        cart.reserve(shippable("Biscuits", "150.50", 4, "0.7"), 1, TODAY)
        assert cart.subtotal() == Decimal("350.50")

    def test_empty(self):
        """A new cart is empty and totals zero."""
        cart = Cart()
        assert cart.is_empty()
        assert cart.subtotal() == 0
