"""
SQLAlchemy models for MenuHub.
"""
# Accounts
from menuhub.models.user import User, UserRole
from menuhub.models.user_session import UserSession

# Restaurants & menu content
from menuhub.models.restaurant import Restaurant, RestaurantStatus
from menuhub.models.menu import Category, MenuItem
from menuhub.models.social_media import SocialMediaLink
from menuhub.models.qr_code import QRCode

# Audit
from menuhub.models.activity_log import ActivityLog, ActivityAction


__all__ = [
    # Accounts
    "User",
    "UserRole",
    "UserSession",
    # Restaurants
    "Restaurant",
    "RestaurantStatus",
    "Category",
    "MenuItem",
    "SocialMediaLink",
    "QRCode",
    # Audit
    "ActivityLog",
    "ActivityAction",
]
