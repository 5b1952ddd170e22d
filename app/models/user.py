from datetime import datetime
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, index=True, default="User")  # Admin, User
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    orders = relationship("Order", back_populates="owner", passive_deletes=True)

    ROLES = ["Admin", "User"]

    @property
    def is_admin(self):
        return self.role == "Admin"

    def can_edit_order(self, order):
        """Admins may edit any order, everyone else only their own."""
        if self.is_admin:
            return True
        return order.user_id == self.id

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "full_name": self.full_name,
            "role": self.role,
            "is_admin": self.is_admin,
        }

    def __repr__(self):
        return f"<User {self.email}>"
