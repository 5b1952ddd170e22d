"""
Unit tests for order payload validation.
"""

from decimal import Decimal

import pytest

from app.models import Order
from app.services.validators import (
    clean_order_data,
    parse_money,
    validate_order,
)


def _payload(**overrides):
    data = {
        "order_code": "ORD-2024-001",
        "status": "Posted",
        "customer_name": "John Doe",
        "phone_number": "(555) 123-4567",
        "pickup_start": "2024-03-01",
        "pickup_end": "2024-03-03",
        "dispatch_day": "2024-03-02",
        "booking_date": "2024-02-25",
        "broker_fee": 350,
        "total_price": 1200.50,
    }
    data.update(overrides)
    return data


class TestValidateOrder:
    """Tests for validate_order."""

    def test_valid_payload(self):
        result = validate_order(_payload())
        assert result.is_valid
        assert result.warnings == []

    def test_missing_required_fields(self):
        result = validate_order(_payload(order_code="", customer_name="   ", dispatch_day=None))
        assert not result.is_valid
        assert "Order ID is required" in result.errors
        assert "Customer name is required" in result.errors
        assert "Dispatch day is required" in result.errors

    def test_invalid_status(self):
        result = validate_order(_payload(status="Shipped"))
        assert "Invalid status: Shipped" in result.errors

    @pytest.mark.parametrize("value", ["2024-3-2", "03/02/2024", "2024-02-30"])
    def test_invalid_dates(self, value):
        result = validate_order(_payload(dispatch_day=value))
        assert "Dispatch day must be a date in YYYY-MM-DD format" in result.errors

    def test_negative_money(self):
        result = validate_order(_payload(broker_fee=-1))
        assert "Broker fee cannot be negative" in result.errors

    def test_non_numeric_money(self):
        result = validate_order(_payload(total_price="lots"))
        assert "Total price must be a number" in result.errors

    def test_missing_money_is_zero(self):
        data = _payload()
        del data["broker_fee"]
        assert validate_order(data).is_valid

    def test_pickup_window_warning(self):
        result = validate_order(_payload(pickup_start="2024-03-05", pickup_end="2024-03-01"))
        assert result.is_valid
        assert "Pickup end is before pickup start" in result.warnings

    def test_fee_above_price_warning(self):
        result = validate_order(_payload(broker_fee=2000, total_price=1500))
        assert result.is_valid
        assert "Broker fee is greater than the total price" in result.warnings

    def test_raise_if_invalid(self):
        result = validate_order(_payload(status="", customer_name=""))
        with pytest.raises(ValueError) as exc:
            result.raise_if_invalid()
        assert "Status is required; Customer name is required" in str(exc.value)


class TestCleanOrderData:

    def test_strips_and_quantizes(self):
        cleaned = clean_order_data(_payload(customer_name="  Jane  ", broker_fee="1,800.5"))
        assert cleaned["customer_name"] == "Jane"
        assert cleaned["broker_fee"] == Decimal("1800.50")
        assert cleaned["total_price"] == Decimal("1200.50")
        assert set(cleaned) == set(Order.EDITABLE_FIELDS)

    def test_parse_money(self):
        assert parse_money("") == Decimal("0")
        assert parse_money(None) == Decimal("0")
        assert parse_money("12.5") == Decimal("12.5")
        assert parse_money("abc") is None
        assert parse_money(True) is None


class TestOrderStatusModel:
    """The model only accepts the six statuses."""

    def test_valid_status(self):
        assert Order(status="On Hold").status == "On Hold"

    def test_invalid_status_raises(self):
        with pytest.raises(ValueError):
            Order(status="Lost")

    def test_invalid_status_assignment_raises(self):
        order = Order(status="Posted")
        with pytest.raises(ValueError):
            order.status = "Unknown"
