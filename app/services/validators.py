"""
Data Quality Validators

Validation for order create/edit payloads.
Blocking problems are errors; suspicious but allowed values are warnings.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Dict, Any, List

from app.models import OrderStatus
from app.services.order_filters import is_iso_date


REQUIRED_FIELDS = {
    "order_code": "Order ID",
    "status": "Status",
    "customer_name": "Customer name",
    "phone_number": "Phone number",
    "pickup_start": "Pickup start",
    "pickup_end": "Pickup end",
    "dispatch_day": "Dispatch day",
    "booking_date": "Booking date",
}

DATE_FIELDS = ("pickup_start", "pickup_end", "dispatch_day", "booking_date")
ORDER_STATUSES = frozenset(s.value for s in OrderStatus)

MONEY_FIELDS = {
    "broker_fee": "Broker fee",
    "total_price": "Total price",
}


class ValidationResult:
    """Container for validation results including warnings."""
    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, msg: str):
        self.errors.append(msg)

    def add_warning(self, msg: str):
        self.warnings.append(msg)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def raise_if_invalid(self):
        """Raise ValueError if there are blocking errors."""
        if self.errors:
            raise ValueError("; ".join(self.errors))


def _is_empty(value: Any) -> bool:
    """Check if value is None or empty string."""
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    return False


def _is_calendar_date(value: str) -> bool:
    if not is_iso_date(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def parse_money(value: Any) -> Optional[Decimal]:
    """Parse a money value; empty means zero, garbage means None."""
    if _is_empty(value):
        return Decimal("0")
    if isinstance(value, bool):
        return None
    try:
        return Decimal(str(value).strip().replace(",", ""))
    except (InvalidOperation, ValueError):
        return None


def validate_order(data: Dict[str, Any]) -> ValidationResult:
    """
    Validate order data.

    Required fields: order_code, status, customer_name, phone_number and the
    four date fields. Dates must be real "YYYY-MM-DD" dates, money must be
    a non-negative number.

    Args:
        data: Dict with order fields (JSON body)

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    # --- HARD REQUIRED FIELDS ---
    for field, label in REQUIRED_FIELDS.items():
        if _is_empty(data.get(field)):
            result.add_error(f"{label} is required")

    status = data.get("status")
    if not _is_empty(status) and str(status).strip() not in ORDER_STATUSES:
        result.add_error(f"Invalid status: {status}")

    for field in DATE_FIELDS:
        value = data.get(field)
        if _is_empty(value):
            continue
        if not _is_calendar_date(str(value).strip()):
            result.add_error(f"{REQUIRED_FIELDS[field]} must be a date in YYYY-MM-DD format")

    money = {}
    for field, label in MONEY_FIELDS.items():
        amount = parse_money(data.get(field))
        if amount is None or not amount.is_finite():
            result.add_error(f"{label} must be a number")
        elif amount < 0:
            result.add_error(f"{label} cannot be negative")
        else:
            money[field] = amount

    # --- WARNINGS ---
    pickup_start = data.get("pickup_start")
    pickup_end = data.get("pickup_end")
    if (
        _is_calendar_date(str(pickup_start or "").strip())
        and _is_calendar_date(str(pickup_end or "").strip())
        and str(pickup_end).strip() < str(pickup_start).strip()
    ):
        result.add_warning("Pickup end is before pickup start")

    if len(money) == 2 and money["broker_fee"] > money["total_price"]:
        result.add_warning("Broker fee is greater than the total price")

    return result


def clean_order_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize a validated payload into model field values.

    Call only after validate_order() passed.
    """
    cleaned = {}
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        cleaned[field] = str(value).strip() if value is not None else None
    cleaned["status"] = OrderStatus(cleaned["status"]).value
    for field in MONEY_FIELDS:
        cleaned[field] = parse_money(data.get(field)).quantize(Decimal("0.01"))
    return cleaned
