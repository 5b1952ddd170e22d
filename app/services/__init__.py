from app.services.order_filters import (
    filter_by_date_range,
    is_iso_date,
    is_range_active,
)
from app.services.order_metrics import (
    MetricsPolicy,
    DEFAULT_POLICY,
    compute_stats,
    compute_target_progress,
    compute_salary,
)
from app.services.dashboard_service import (
    build_dashboard,
    list_order_owners,
    LiveDashboard,
)

__all__ = [
    'filter_by_date_range',
    'is_iso_date',
    'is_range_active',
    'MetricsPolicy',
    'DEFAULT_POLICY',
    'compute_stats',
    'compute_target_progress',
    'compute_salary',
    'build_dashboard',
    'list_order_owners',
    'LiveDashboard',
]
