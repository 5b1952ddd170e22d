from app.models.user import User
from app.models.order import Order, OrderStatus

__all__ = [
    "User",
    "Order",
    "OrderStatus",
]
