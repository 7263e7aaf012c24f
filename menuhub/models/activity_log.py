"""
Append-only audit trail of admin actions.
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Index, func
from sqlalchemy.orm import relationship

from menuhub.db.base import Base


class ActivityAction(str, enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    LOGIN = "login"


class ActivityLog(Base):
    """
    One row per mutation or login.

    Rows are only ever inserted. When the referenced user or restaurant is
    deleted the foreign key is nulled so the history stays readable.
    """
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    action = Column(String(20), nullable=False)
    entity_type = Column(String(50), nullable=False)  # restaurant, user, category, menuItem, ...
    entity_id = Column(Integer, nullable=False)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id", ondelete="SET NULL"), nullable=True)
    details = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="activity_logs")
    restaurant = relationship("Restaurant", back_populates="activity_logs")

    __table_args__ = (
        Index('idx_activity_logs_restaurant_created', 'restaurant_id', 'created_at'),
    )
