"""
Live order feed.

Push-based replacement for polling: subscribers register a callback and
receive a fresh, immutable snapshot of their order scope right away and
again after every change. Order routes call `order_feed.notify()` after
each commit.
"""
import itertools
import logging
from typing import Callable, Dict, Optional, Tuple

from app.database import SessionLocal
from app.models import Order
from app.services.order_repository import load_snapshot

logger = logging.getLogger(__name__)

Snapshot = Tuple[Order, ...]
SnapshotCallback = Callable[[Snapshot], None]


class OrderFeed:
    """Delivers order snapshots to subscribers."""

    def __init__(self, session_factory=SessionLocal):
        self._session_factory = session_factory
        self._subscriptions: Dict[int, Tuple[SnapshotCallback, Optional[int]]] = {}
        self._ids = itertools.count(1)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(
        self,
        callback: SnapshotCallback,
        owner_id: Optional[int] = None,
    ) -> Callable[[], None]:
        """
        Register callback for one owner's orders (all orders when owner_id is None).

        The current snapshot is delivered before this returns.

        Returns:
            A function that removes the subscription; safe to call twice
        """
        subscription_id = next(self._ids)
        self._subscriptions[subscription_id] = (callback, owner_id)
        logger.info(f"Feed subscription {subscription_id} added (owner={owner_id})")

        db = self._session_factory()
        try:
            self._deliver(subscription_id, callback, load_snapshot(db, owner_id))
        finally:
            db.close()

        def unsubscribe():
            if self._subscriptions.pop(subscription_id, None) is not None:
                logger.info(f"Feed subscription {subscription_id} removed")

        return unsubscribe

    def notify(self):
        """Reload and push a snapshot to every subscriber."""
        if not self._subscriptions:
            return

        db = self._session_factory()
        try:
            snapshots: Dict[Optional[int], Snapshot] = {}
            for subscription_id, (callback, owner_id) in list(self._subscriptions.items()):
                if owner_id not in snapshots:
                    snapshots[owner_id] = load_snapshot(db, owner_id)
                self._deliver(subscription_id, callback, snapshots[owner_id])
        finally:
            db.close()

    def _deliver(self, subscription_id: int, callback: SnapshotCallback, snapshot: Snapshot):
        try:
            callback(snapshot)
        except Exception as e:
            logger.error(f"Feed subscriber {subscription_id} failed: {str(e)}")


# Global feed instance
order_feed = OrderFeed()
