import enum

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from menuhub.db.base import Base


class RestaurantStatus(str, enum.Enum):
    SETUP = "setup"
    ACTIVE = "active"
    INACTIVE = "inactive"


DEFAULT_PRIMARY_COLOR = "#e65100"
DEFAULT_SECONDARY_COLOR = "#f57c00"


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    logo = Column(String(1024))  # URL to logo image
    phone = Column(String(50))
    email = Column(String(255))
    address = Column(String(512))
    # One restaurant per restaurant admin
    admin_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    status = Column(String(20), nullable=False, default=RestaurantStatus.SETUP.value)
    primary_color = Column(String(7), nullable=False, default=DEFAULT_PRIMARY_COLOR)
    secondary_color = Column(String(7), nullable=False, default=DEFAULT_SECONDARY_COLOR)
    rtl = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    admin = relationship("User", back_populates="restaurant")
    categories = relationship("Category", back_populates="restaurant", cascade="all, delete-orphan")
    menu_items = relationship(
        "MenuItem", back_populates="restaurant", cascade="all, delete-orphan", order_by="MenuItem.id"
    )
    social_media_links = relationship(
        "SocialMediaLink", back_populates="restaurant", cascade="all, delete-orphan", order_by="SocialMediaLink.id"
    )
    qr_codes = relationship("QRCode", back_populates="restaurant", cascade="all, delete-orphan", order_by="QRCode.id")
    # Audit rows outlive the restaurant; their restaurant_id is nulled on delete
    activity_logs = relationship("ActivityLog", back_populates="restaurant")

    @property
    def is_public(self) -> bool:
        return self.status == RestaurantStatus.ACTIVE.value
