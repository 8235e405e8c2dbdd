"""Unit tests for the Order aggregate and its business rules."""

from decimal import Decimal
from uuid import uuid4

import pytest

from ordering.domain.exceptions import InvalidArgumentError, InvalidStateError
from ordering.domain.model.order import Order, OrderLine, OrderStatus
from ordering.domain.model.value_objects import Money, Quantity


def _order_with(*lines: tuple[str, int, str]) -> Order:
    """Helper to build an open order with the given (product, qty, price) lines."""
    order = Order.create(uuid4())
    for product_id, qty, price in lines:
        order.update_order_line(product_id, qty, Money.of(price))
    return order


def _snapshot(order: Order):
    return (
        order.order_lines,
        order.discount,
        order.total_amount,
        order.account_id,
        order.status,
    )


class TestOrderCreation:

    def test_new_order_is_empty_and_open(self):
        order_id = uuid4()
        order = Order.create(order_id)
        assert order.id == order_id
        assert order.order_lines == ()
        assert order.discount == Money.zero()
        assert order.total_amount == Money.zero()
        assert order.account_id is None
        assert order.status == OrderStatus.OPEN
        assert not order.is_shipped

    def test_orders_compare_by_identity(self):
        order_id = uuid4()
        assert Order.create(order_id) == Order.create(order_id)
        assert Order.create(uuid4()) != Order.create(order_id)


class TestOrderLine:

    def test_line_total(self):
        line = OrderLine("P1", Quantity(3), Money.of("15.00"))
        assert line.line_total == Money.of("45.00")

    def test_negative_unit_price_rejected(self):
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            OrderLine("P1", Quantity(1), Money.of("-1"))

    def test_line_is_immutable(self):
        line = OrderLine("P1", Quantity(1), Money.of("1"))
        with pytest.raises(AttributeError):
            line.quantity = Quantity(2)  # type: ignore[misc]


class TestUpdateOrderLine:

    def test_adds_new_line(self):
        order = _order_with(("P1", 2, "10.00"))
        assert order.order_lines == (OrderLine("P1", Quantity(2), Money.of("10.00")),)
        assert order.total_amount == Money.of("20.00")

    def test_new_lines_are_appended_in_order(self):
        order = _order_with(("P1", 1, "1"), ("P2", 1, "1"), ("P3", 1, "1"))
        assert [line.product_id for line in order.order_lines] == ["P1", "P2", "P3"]

    def test_existing_line_replaced_in_place(self):
        order = _order_with(("P1", 1, "1"), ("P2", 1, "2"), ("P3", 1, "3"))
        order.update_order_line("P2", 5, Money.of("4.00"))

        assert [line.product_id for line in order.order_lines] == ["P1", "P2", "P3"]
        assert order.order_lines[1].quantity == Quantity(5)
        assert order.order_lines[1].unit_price == Money.of("4.00")
        assert order.total_amount == Money.of("24.00")

    def test_zero_quantity_removes_line(self):
        order = _order_with(("P1", 2, "10.00"), ("P2", 1, "5.00"))
        order.update_order_line("P1", 0, Money.zero())

        assert [line.product_id for line in order.order_lines] == ["P2"]
        assert order.total_amount == Money.of("5.00")

    def test_zero_quantity_for_absent_product_is_noop(self):
        order = _order_with(("P1", 2, "10.00"))
        order.update_order_line("missing", 0, Money.zero())

        assert len(order.order_lines) == 1
        assert order.total_amount == Money.of("20.00")

    def test_negative_quantity_rejected_without_change(self):
        order = _order_with(("P1", 2, "10.00"))
        before = _snapshot(order)

        with pytest.raises(InvalidArgumentError, match="must be positive"):
            order.update_order_line("P1", -1, Money.of("10.00"))
        assert _snapshot(order) == before

    def test_negative_price_rejected_without_change(self):
        order = _order_with(("P1", 2, "10.00"))
        before = _snapshot(order)

        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            order.update_order_line("P2", 1, Money.of("-0.01"))
        assert _snapshot(order) == before

    def test_float_quantity_rejected(self):
        order = Order.create(uuid4())
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            order.update_order_line("P1", 0.0, Money.of("1"))  # type: ignore[arg-type]

    def test_price_in_other_currency_rejected(self):
        order = Order.create(uuid4())
        with pytest.raises(InvalidArgumentError, match="priced in USD"):
            order.update_order_line("P1", 1, Money.of("1", "EUR"))
        assert order.order_lines == ()

    def test_free_line_allowed(self):
        order = _order_with(("GIFT", 1, "0"))
        assert order.total_amount == Money.zero()


class TestReadOnlyLines:

    def test_lines_are_a_tuple(self):
        order = _order_with(("P1", 1, "1"))
        assert isinstance(order.order_lines, tuple)

    def test_snapshot_unaffected_by_later_updates(self):
        order = _order_with(("P1", 1, "1"))
        seen = order.order_lines
        order.update_order_line("P2", 1, Money.of("1"))
        assert len(seen) == 1
        assert len(order.order_lines) == 2

    def test_lines_property_cannot_be_assigned(self):
        order = Order.create(uuid4())
        with pytest.raises(AttributeError):
            order.order_lines = ()  # type: ignore[misc]

    def test_total_cannot_be_assigned(self):
        order = Order.create(uuid4())
        with pytest.raises(AttributeError):
            order.total_amount = Money.of("1")  # type: ignore[misc]


class TestDiscount:

    def test_discount_reduces_total(self):
        order = _order_with(("P1", 2, "10.00"))
        order.update_discount(Money.of("5.00"))
        assert order.discount == Money.of("5.00")
        assert order.total_amount == Money.of("15.00")

    def test_zero_discount_allowed(self):
        order = _order_with(("P1", 2, "10.00"))
        order.update_discount(Money.of("5.00"))
        order.update_discount(Money.zero())
        assert order.total_amount == Money.of("20.00")

    def test_negative_discount_rejected_without_change(self):
        order = _order_with(("P1", 2, "10.00"))
        order.update_discount(Money.of("5.00"))

        with pytest.raises(InvalidArgumentError, match="zero or more"):
            order.update_discount(Money.of("-1"))
        assert order.discount == Money.of("5.00")
        assert order.total_amount == Money.of("15.00")

    @pytest.mark.parametrize("value", ["NaN", "Infinity"])
    def test_non_finite_discount_rejected_without_change(self, value):
        order = _order_with(("P1", 2, "10.00"))
        with pytest.raises(InvalidArgumentError, match="must be finite"):
            order.update_discount(Money(Decimal(value)))
        assert order.discount == Money.zero()
        assert order.total_amount == Money.of("20.00")

    def test_discount_larger_than_subtotal_gives_negative_total(self):
        order = _order_with(("P1", 1, "3.00"))
        order.update_discount(Money.of("5.00"))
        assert order.total_amount == Money(Decimal("-2.00"))

    def test_discount_applies_to_later_lines(self):
        order = Order.create(uuid4())
        order.update_discount(Money.of("1.00"))
        order.update_order_line("P1", 4, Money.of("2.50"))
        assert order.total_amount == Money.of("9.00")


class TestAccountReference:

    def test_account_stored_by_identity(self):
        account_id = uuid4()
        order = Order.create(uuid4())
        order.update_account(account_id)
        assert order.account_id == account_id

    def test_account_can_be_changed_while_open(self):
        order = Order.create(uuid4())
        order.update_account(uuid4())
        second = uuid4()
        order.update_account(second)
        assert order.account_id == second

    def test_account_blocked_after_shipping(self):
        first = uuid4()
        order = _order_with(("P1", 1, "1"))
        order.update_account(first)
        order.ship()

        with pytest.raises(InvalidStateError, match="shipped order"):
            order.update_account(uuid4())
        assert order.account_id == first


class TestShip:

    def test_ship_empty_order_rejected(self):
        order = Order.create(uuid4())
        with pytest.raises(InvalidStateError, match="no lines"):
            order.ship()
        assert not order.is_shipped

    def test_ship_after_removing_last_line_rejected(self):
        order = _order_with(("P1", 1, "1"))
        order.update_order_line("P1", 0, Money.zero())
        with pytest.raises(InvalidStateError, match="no lines"):
            order.ship()

    def test_ship_transitions_to_shipped(self):
        order = _order_with(("P1", 1, "1"))
        order.ship()
        assert order.is_shipped
        assert order.status == OrderStatus.SHIPPED

    def test_ship_twice_rejected(self):
        order = _order_with(("P1", 1, "1"))
        order.ship()
        with pytest.raises(InvalidStateError, match="already shipped"):
            order.ship()
        assert order.is_shipped

    def test_shipped_order_is_frozen(self):
        order = _order_with(("P1", 2, "10.00"))
        order.update_discount(Money.of("1.00"))
        order.ship()
        before = _snapshot(order)

        with pytest.raises(InvalidStateError, match="Cannot modify a shipped order"):
            order.update_order_line("P2", 1, Money.of("5.00"))
        with pytest.raises(InvalidStateError, match="Cannot modify a shipped order"):
            order.update_order_line("P1", 0, Money.zero())
        with pytest.raises(InvalidStateError, match="Cannot modify a shipped order"):
            order.update_discount(Money.of("2.00"))
        assert _snapshot(order) == before

    def test_negative_discount_on_shipped_order_is_an_argument_error(self):
        order = _order_with(("P1", 1, "1"))
        order.ship()
        with pytest.raises(InvalidArgumentError):
            order.update_discount(Money.of("-1"))


class TestWalkthrough:

    def test_build_discount_ship_then_reject_change(self):
        order = Order.create(uuid4())

        order.update_order_line("P1", 2, Money.of("10.00"))
        assert [(l.product_id, l.quantity.value, l.unit_price) for l in order.order_lines] == [
            ("P1", 2, Money.of("10.00"))
        ]
        assert order.total_amount == Money.of("20.00")

        order.update_order_line("P1", 3, Money.of("10.00"))
        assert len(order.order_lines) == 1
        assert order.total_amount == Money.of("30.00")

        order.update_discount(Money.of("5.00"))
        assert order.total_amount == Money.of("25.00")

        order.ship()
        assert order.is_shipped

        with pytest.raises(InvalidStateError):
            order.update_order_line("P2", 1, Money.of("5.00"))
        assert order.total_amount == Money.of("25.00")
