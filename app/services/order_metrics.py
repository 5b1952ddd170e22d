"""
Dashboard Metrics Service

Three independent calculations over one set of orders:

- Status summary: count per status, total, cancellation rate
- Target progress: broker fees of Completed + Dispatched orders vs. the target
- Salary: tiered commission on that broker fee sum
    * fee sum >= target => base + 10% of fee sum
    * fee sum <  target => 20% of fee sum

Amounts are plain floats. Rounding to cents is a display concern
(see format_currency).
"""

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Iterable, Tuple

from app.models import Order, OrderStatus


SALES_TARGET = 2300.0
BASE_SALARY = 250.0
TARGET_ACHIEVED_RATE = 0.10
UNDER_TARGET_RATE = 0.20
TARGET_STATUSES = (OrderStatus.COMPLETED, OrderStatus.DISPATCHED)


@dataclass(frozen=True)
class MetricsPolicy:
    """Commission policy values used by the target and salary calculations."""
    target: float = SALES_TARGET
    base_salary: float = BASE_SALARY
    achieved_rate: float = TARGET_ACHIEVED_RATE
    under_target_rate: float = UNDER_TARGET_RATE
    target_statuses: Tuple[OrderStatus, ...] = TARGET_STATUSES

    @property
    def achieved_description(self) -> str:
        return (
            f"{self.achieved_rate:.0%} commission + "
            f"{format_currency(self.base_salary, cents=False)} base (target achieved)"
        )

    @property
    def under_target_description(self) -> str:
        return (
            f"{self.under_target_rate:.0%} commission "
            f"(under {format_currency(self.target, cents=False)} target)"
        )


DEFAULT_POLICY = MetricsPolicy()


@dataclass(frozen=True)
class DashboardStats:
    posted_count: int = 0
    on_hold_count: int = 0
    in_progress_count: int = 0
    dispatched_count: int = 0
    completed_count: int = 0
    canceled_count: int = 0
    total_count: int = 0
    cancellation_rate: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TargetProgress:
    broker_fee_sum: float
    target: float
    remaining: float
    percentage_complete: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SalaryCalculation:
    amount: float
    calculation: str
    target_achieved: bool

    def to_dict(self) -> dict:
        return asdict(self)


def format_currency(amount: float, cents: bool = True) -> str:
    """Format an amount for display, e.g. 2300 -> "$2,300.00"."""
    if cents:
        return f"${amount:,.2f}"
    return f"${amount:,.0f}"


def _status_of(order: Order):
    try:
        return OrderStatus(order.status)
    except ValueError:
        return None


def compute_stats(orders: Iterable[Order]) -> DashboardStats:
    """Tally orders per status; cancellation rate is 0 for an empty set."""
    orders = list(orders)
    counts = Counter(_status_of(order) for order in orders)
    total_count = len(orders)
    canceled_count = counts[OrderStatus.CANCELED]
    cancellation_rate = (canceled_count / total_count) * 100 if total_count > 0 else 0.0

    return DashboardStats(
        posted_count=counts[OrderStatus.POSTED],
        on_hold_count=counts[OrderStatus.ON_HOLD],
        in_progress_count=counts[OrderStatus.IN_PROGRESS],
        dispatched_count=counts[OrderStatus.DISPATCHED],
        completed_count=counts[OrderStatus.COMPLETED],
        canceled_count=canceled_count,
        total_count=total_count,
        cancellation_rate=cancellation_rate,
    )


def compute_target_progress(
    orders: Iterable[Order],
    policy: MetricsPolicy = DEFAULT_POLICY,
) -> TargetProgress:
    """
    Sum broker fees of orders counting toward the target.

    Args:
        orders: Orders to consider (already date filtered)
        policy: Target and qualifying statuses

    Returns:
        TargetProgress with an uncapped percentage
    """
    broker_fee_sum = sum(
        float(order.broker_fee or 0)
        for order in orders
        if _status_of(order) in policy.target_statuses
    )
    remaining = max(0.0, policy.target - broker_fee_sum)
    percentage_complete = (broker_fee_sum / policy.target) * 100 if policy.target > 0 else 0.0

    return TargetProgress(
        broker_fee_sum=broker_fee_sum,
        target=policy.target,
        remaining=remaining,
        percentage_complete=percentage_complete,
    )


def compute_salary(
    target_progress: TargetProgress,
    policy: MetricsPolicy = DEFAULT_POLICY,
) -> SalaryCalculation:
    """Apply the two-tier commission rule to the target fee sum."""
    broker_fee_sum = target_progress.broker_fee_sum

    if broker_fee_sum >= policy.target:
        return SalaryCalculation(
            amount=policy.base_salary + policy.achieved_rate * broker_fee_sum,
            calculation=policy.achieved_description,
            target_achieved=True,
        )

    return SalaryCalculation(
        amount=policy.under_target_rate * broker_fee_sum,
        calculation=policy.under_target_description,
        target_achieved=False,
    )
