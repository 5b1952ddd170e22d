import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.models import Order, User

logger = logging.getLogger(__name__)


def _orders_query(db: Session, owner_id: Optional[int] = None):
    query = db.query(Order)
    if owner_id is not None:
        query = query.filter(Order.user_id == owner_id)
    return query.order_by(Order.created_at.desc())


def scoped_orders(db: Session, user: User, owner_id: Optional[int] = None) -> List[Order]:
    """
    Orders visible to a user, newest first.

    Admins see everything, or a single owner's orders when owner_id is given.
    Everyone else sees only their own orders and owner_id is ignored.
    """
    if not user.is_admin:
        owner_id = user.id
    return _orders_query(db, owner_id).all()


def load_snapshot(db: Session, owner_id: Optional[int] = None) -> Tuple[Order, ...]:
    """Immutable snapshot of one owner's orders (or all orders)."""
    return tuple(_orders_query(db, owner_id).all())


def get_order_for_user(db: Session, user: User, order_id: str) -> Optional[Order]:
    """Return the order, or None if it does not exist or the user may not see it."""
    order = db.query(Order).filter(Order.id == order_id).first()
    if not order:
        return None
    if not user.can_edit_order(order):
        logger.warning(f"User {user.id} denied access to order {order_id}")
        return None
    return order


def create_order(db: Session, user: User, data: Dict[str, Any]) -> Order:
    """Create an order owned by user from cleaned field values."""
    order = Order(
        **{field: data[field] for field in Order.EDITABLE_FIELDS},
        user_id=user.id,
        user_email=user.email,
        created_at=datetime.utcnow(),
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info(f"Order {order.order_code} ({order.id}) created by user {user.id}")
    return order


def update_order(db: Session, order: Order, data: Dict[str, Any]) -> Order:
    """Replace the editable fields of an order."""
    for field in Order.EDITABLE_FIELDS:
        setattr(order, field, data[field])
    order.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(order)
    logger.info(f"Order {order.order_code} ({order.id}) updated")
    return order


def delete_order(db: Session, order: Order) -> None:
    order_id = order.id
    db.delete(order)
    db.commit()
    logger.info(f"Order {order_id} deleted")
