"""
Audit trail helpers.

``record_activity`` only adds the row to the session; the caller commits it
together with the change it describes, so a failed write never leaves a
dangling log entry behind.
"""
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from menuhub.models.activity_log import ActivityAction, ActivityLog

ENTITY_USER = "user"
ENTITY_RESTAURANT = "restaurant"
ENTITY_CATEGORY = "category"
ENTITY_MENU_ITEM = "menuItem"
ENTITY_SOCIAL_MEDIA_LINK = "socialMediaLink"
ENTITY_QR_CODE = "qrCode"


def record_activity(
    db: Session,
    *,
    actor_id: Optional[int],
    action: ActivityAction,
    entity_type: str,
    entity_id: int,
    restaurant_id: Optional[int] = None,
    details: Optional[dict[str, Any]] = None,
) -> ActivityLog:
    log = ActivityLog(
        user_id=actor_id,
        action=action.value,
        entity_type=entity_type,
        entity_id=entity_id,
        restaurant_id=restaurant_id,
        details=details or {},
    )
    db.add(log)
    return log


def recent_activity(db: Session, limit: int = 10) -> List[ActivityLog]:
    """Newest entries across the whole platform."""
    return (
        db.query(ActivityLog)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .limit(limit)
        .all()
    )


def restaurant_activity(db: Session, restaurant_id: int) -> List[ActivityLog]:
    """All entries tagged with one restaurant, newest first."""
    return (
        db.query(ActivityLog)
        .filter(ActivityLog.restaurant_id == restaurant_id)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .all()
    )
