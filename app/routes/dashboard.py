import asyncio
import json
import logging
from typing import Optional

from fastapi import APIRouter, Request, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.auth import get_current_user
from app.database import get_db
from app.models import User
from app.services.dashboard_service import LiveDashboard, build_dashboard, list_order_owners
from app.services.order_feed import order_feed
from app.services.order_repository import scoped_orders

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

# Seconds between keep-alive comments on an idle stream
STREAM_KEEPALIVE_SECONDS = 15


@router.get("")
async def dashboard(
    start_date: str = "",
    end_date: str = "",
    user_id: Optional[int] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Status summary, target progress and salary for the visible orders."""
    orders = scoped_orders(db, user, user_id)
    data = build_dashboard(orders, start_date, end_date)

    # Admin owner picker lists every owner, not just the selected one
    if user.is_admin:
        data["owners"] = list_order_owners(scoped_orders(db, user), user)
    else:
        data["owners"] = []
    data["user"] = user.to_dict()
    data["selected_user_id"] = user_id if user.is_admin else user.id
    return data


@router.get("/stream")
async def dashboard_stream(
    request: Request,
    start_date: str = "",
    end_date: str = "",
    user_id: Optional[int] = None,
    user: User = Depends(get_current_user),
):
    """Server-sent events: a fresh dashboard every time the orders change."""
    owner_id = user_id if user.is_admin else user.id
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    live = LiveDashboard()
    live.set_date_range(start_date, end_date)
    live.on_change = lambda data: loop.call_soon_threadsafe(queue.put_nowait, data)

    # Subscribed only while the body is streaming
    async def events():
        unsubscribe = order_feed.subscribe(live, owner_id)
        logger.info(f"Dashboard stream opened for user {user.id} (owner={owner_id})")
        try:
            while not await request.is_disconnected():
                try:
                    data = await asyncio.wait_for(queue.get(), timeout=STREAM_KEEPALIVE_SECONDS)
                except asyncio.TimeoutError:
                    yield ": keep-alive\n\n"
                    continue
                yield f"data: {json.dumps(data)}\n\n"
        finally:
            unsubscribe()
            logger.info(f"Dashboard stream closed for user {user.id}")

    return StreamingResponse(events(), media_type="text/event-stream")
