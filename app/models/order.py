import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship, validates
from app.database import Base


class OrderStatus(str, enum.Enum):
    POSTED = "Posted"
    ON_HOLD = "On Hold"
    IN_PROGRESS = "In Progress"
    DISPATCHED = "Dispatched"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


def _new_order_id() -> str:
    return str(uuid.uuid4())


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=_new_order_id)
    order_code = Column(String(100), nullable=False, index=True)
    status = Column(String(20), nullable=False, index=True, default=OrderStatus.POSTED.value)
    customer_name = Column(String(255), nullable=False)
    phone_number = Column(String(50), nullable=False)
    # Dates are stored as "YYYY-MM-DD" so string order is date order
    pickup_start = Column(String(10), nullable=True)
    pickup_end = Column(String(10), nullable=True)
    dispatch_day = Column(String(10), nullable=True, index=True)
    booking_date = Column(String(10), nullable=True)
    broker_fee = Column(Numeric(12, 2), nullable=False, default=0)
    total_price = Column(Numeric(12, 2), nullable=False, default=0)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_email = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, nullable=True, onupdate=datetime.utcnow)

    # Relationships
    owner = relationship("User", back_populates="orders")

    # Fields an edit may replace (identity, owner and created_at are fixed)
    EDITABLE_FIELDS = (
        "order_code",
        "status",
        "customer_name",
        "phone_number",
        "pickup_start",
        "pickup_end",
        "dispatch_day",
        "booking_date",
        "broker_fee",
        "total_price",
    )

    @validates("status")
    def _validate_status(self, key, value):
        # Raises ValueError for anything outside the six statuses
        return OrderStatus(value).value

    def to_dict(self):
        return {
            "id": self.id,
            "order_code": self.order_code,
            "status": self.status,
            "customer_name": self.customer_name,
            "phone_number": self.phone_number,
            "pickup_start": self.pickup_start,
            "pickup_end": self.pickup_end,
            "dispatch_day": self.dispatch_day,
            "booking_date": self.booking_date,
            "broker_fee": float(self.broker_fee or 0),
            "total_price": float(self.total_price or 0),
            "user_id": self.user_id,
            "user_email": self.user_email,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Order {self.order_code} ({self.status})>"
