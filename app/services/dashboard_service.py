import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from app.models import Order, User
from app.services.order_filters import DateBound, filter_by_date_range, is_range_active
from app.services.order_metrics import (
    DEFAULT_POLICY,
    MetricsPolicy,
    compute_salary,
    compute_stats,
    compute_target_progress,
)

logger = logging.getLogger(__name__)


def describe_date_range(start_date: DateBound, end_date: DateBound) -> str:
    if is_range_active(start_date, end_date):
        return f"Showing data from {start_date} to {end_date}"
    return "Showing all data - apply date filter to narrow results"


def build_dashboard(
    orders: Iterable[Order],
    start_date: DateBound = "",
    end_date: DateBound = "",
    policy: MetricsPolicy = DEFAULT_POLICY,
) -> dict:
    """Filter once, then derive every dashboard view from the same subset."""
    filtered = filter_by_date_range(orders, start_date, end_date)
    target_progress = compute_target_progress(filtered, policy)
    salary = compute_salary(target_progress, policy)

    return {
        "date_range": {
            "start_date": start_date or "",
            "end_date": end_date or "",
            "active": is_range_active(start_date, end_date),
            "description": describe_date_range(start_date, end_date),
        },
        "stats": compute_stats(filtered).to_dict(),
        "target_progress": target_progress.to_dict(),
        "salary": salary.to_dict(),
        "order_count": len(filtered),
    }


def list_order_owners(orders: Iterable[Order], current_user: Optional[User] = None) -> List[dict]:
    """
    Distinct order owners in first-seen order, for the admin owner picker.

    Label priority: email stored on any of the owner's orders, then the
    current user's own email, then "User-" plus the first 8 id characters.
    """
    labels: Dict[int, Optional[str]] = {}
    for order in orders:
        if order.user_id not in labels or (labels[order.user_id] is None and order.user_email):
            labels[order.user_id] = order.user_email or labels.get(order.user_id)

    owners = []
    for user_id, label in labels.items():
        if not label and current_user is not None and current_user.id == user_id:
            label = current_user.email
        owners.append({"id": user_id, "label": label or f"User-{str(user_id)[:8]}"})
    return owners


class LiveDashboard:
    """
    Dashboard kept current by an order feed.

    Pass an instance as the feed callback; every snapshot and every date
    range change recomputes all views and calls on_change with the result.
    """

    def __init__(
        self,
        policy: MetricsPolicy = DEFAULT_POLICY,
        on_change: Optional[Callable[[dict], None]] = None,
    ):
        self.policy = policy
        self.on_change = on_change
        self.start_date: DateBound = ""
        self.end_date: DateBound = ""
        self.orders: Sequence[Order] = ()
        self.data = build_dashboard(self.orders, policy=policy)

    def __call__(self, snapshot: Sequence[Order]):
        self.orders = tuple(snapshot)
        self._recompute()

    def set_date_range(self, start_date: DateBound, end_date: DateBound):
        self.start_date = start_date or ""
        self.end_date = end_date or ""
        self._recompute()

    def clear_date_range(self):
        self.set_date_range("", "")

    def _recompute(self):
        self.data = build_dashboard(self.orders, self.start_date, self.end_date, self.policy)
        logger.debug(
            f"Dashboard recomputed: {self.data['order_count']} of {len(self.orders)} orders in range"
        )
        if self.on_change is not None:
            self.on_change(self.data)
