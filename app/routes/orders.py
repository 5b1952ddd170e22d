import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.auth import get_current_user
from app.database import get_db
from app.models import User
from app.services.order_feed import order_feed
from app.services.order_filters import filter_by_date_range
from app.services.order_repository import (
    create_order,
    delete_order,
    get_order_for_user,
    scoped_orders,
    update_order,
)
from app.services.validators import clean_order_data, validate_order

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


async def _read_payload(request: Request) -> Optional[dict]:
    try:
        payload = await request.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


def _not_found():
    return JSONResponse({"error": "Order not found"}, status_code=404)


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------
@router.get("")
async def list_orders(
    start_date: str = "",
    end_date: str = "",
    user_id: Optional[int] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Orders visible to the user, narrowed to the dispatch-day range."""
    orders = filter_by_date_range(scoped_orders(db, user, user_id), start_date, end_date)
    return [order.to_dict() for order in orders]


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------
@router.post("")
async def add_order(
    request: Request,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    payload = await _read_payload(request)
    if payload is None:
        return JSONResponse({"error": "Request body must be a JSON object"}, status_code=400)

    result = validate_order(payload)
    if not result.is_valid:
        logger.warning(f"Rejected new order from user {user.id}: {result.errors}")
        return JSONResponse({"error": "; ".join(result.errors)}, status_code=400)

    order = create_order(db, user, clean_order_data(payload))
    order_feed.notify()
    return JSONResponse(
        {"order": order.to_dict(), "warnings": result.warnings},
        status_code=201,
    )


# ---------------------------------------------------------------------------
# Detail
# ---------------------------------------------------------------------------
@router.get("/{order_id}")
async def get_order(
    order_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    order = get_order_for_user(db, user, order_id)
    if not order:
        return _not_found()
    return order.to_dict()


# ---------------------------------------------------------------------------
# Edit
# ---------------------------------------------------------------------------
@router.put("/{order_id}")
async def edit_order(
    order_id: str,
    request: Request,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    order = get_order_for_user(db, user, order_id)
    if not order:
        return _not_found()

    payload = await _read_payload(request)
    if payload is None:
        return JSONResponse({"error": "Request body must be a JSON object"}, status_code=400)

    result = validate_order(payload)
    if not result.is_valid:
        logger.warning(f"Rejected edit of order {order_id}: {result.errors}")
        return JSONResponse({"error": "; ".join(result.errors)}, status_code=400)

    order = update_order(db, order, clean_order_data(payload))
    order_feed.notify()
    return {"order": order.to_dict(), "warnings": result.warnings}


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------
@router.delete("/{order_id}")
async def remove_order(
    order_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    order = get_order_for_user(db, user, order_id)
    if not order:
        return _not_found()

    delete_order(db, order)
    order_feed.notify()
    return {"ok": True}
