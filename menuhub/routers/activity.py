"""
Activity log router (read-only).
"""
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from menuhub.core.deps import get_principal, get_super_admin
from menuhub.core.permissions import Principal, get_owned_restaurant
from menuhub.db.session import get_db
from menuhub.schemas.activity import ActivityLogResponse
from menuhub.schemas.base import EntityId
from menuhub.services.activity import recent_activity, restaurant_activity

router = APIRouter(tags=["activity"])


@router.get("/activity", response_model=List[ActivityLogResponse])
def list_recent_activity(
    limit: int = Query(10, ge=1, le=100, description="Number of entries to return"),
    db: Session = Depends(get_db),
    admin: Principal = Depends(get_super_admin),
):
    """Most recent activity across all restaurants."""
    return recent_activity(db, limit)


@router.get("/restaurants/{restaurant_id}/activity", response_model=List[ActivityLogResponse])
def list_restaurant_activity(
    restaurant_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    get_owned_restaurant(db, principal, restaurant_id)
    return restaurant_activity(db, restaurant_id)
