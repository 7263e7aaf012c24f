import enum

from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship

from menuhub.db.base import Base


class UserRole(str, enum.Enum):
    SUPER_ADMIN = "super_admin"
    RESTAURANT_ADMIN = "restaurant_admin"


class User(Base):
    """Platform account, either a super admin or a restaurant admin."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=UserRole.RESTAURANT_ADMIN.value)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    restaurant = relationship("Restaurant", back_populates="admin", uselist=False)
    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")
    activity_logs = relationship("ActivityLog", back_populates="user")
