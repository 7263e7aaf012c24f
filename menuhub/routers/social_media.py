"""
Social media links router.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menuhub.core.deps import get_principal
from menuhub.core.permissions import Principal, get_owned_child, get_owned_restaurant
from menuhub.db.session import get_db
from menuhub.models.activity_log import ActivityAction
from menuhub.models.social_media import SocialMediaLink
from menuhub.schemas.base import EntityId, MessageResponse
from menuhub.schemas.social_media import (
    SocialMediaLinkCreate,
    SocialMediaLinkResponse,
    SocialMediaLinkUpdate,
)
from menuhub.services.activity import ENTITY_SOCIAL_MEDIA_LINK, record_activity

router = APIRouter(tags=["social-media"])

LABEL = "Social media link"


@router.get("/restaurants/{restaurant_id}/social-media", response_model=List[SocialMediaLinkResponse])
def list_social_media_links(
    restaurant_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    get_owned_restaurant(db, principal, restaurant_id)

    return (
        db.query(SocialMediaLink)
        .filter(SocialMediaLink.restaurant_id == restaurant_id)
        .order_by(SocialMediaLink.id.asc())
        .all()
    )


@router.post(
    "/restaurants/{restaurant_id}/social-media",
    response_model=SocialMediaLinkResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_social_media_link(
    restaurant_id: EntityId,
    link_data: SocialMediaLinkCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    restaurant = get_owned_restaurant(db, principal, restaurant_id)

    link = SocialMediaLink(restaurant=restaurant, **link_data.model_dump())
    db.add(link)
    db.flush()

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.CREATE,
        entity_type=ENTITY_SOCIAL_MEDIA_LINK,
        entity_id=link.id,
        restaurant_id=restaurant_id,
        details={"platform": link.platform},
    )
    db.commit()
    db.refresh(link)

    return link


@router.get("/social-media/{link_id}", response_model=SocialMediaLinkResponse)
def get_social_media_link(
    link_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    return get_owned_child(db, principal, SocialMediaLink, link_id, LABEL)


@router.put("/social-media/{link_id}", response_model=SocialMediaLinkResponse)
def update_social_media_link(
    link_id: EntityId,
    update_data: SocialMediaLinkUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    link = get_owned_child(db, principal, SocialMediaLink, link_id, LABEL)

    for field, value in update_data.changes().items():
        setattr(link, field, value)

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.UPDATE,
        entity_type=ENTITY_SOCIAL_MEDIA_LINK,
        entity_id=link.id,
        restaurant_id=link.restaurant_id,
        details={"platform": link.platform},
    )
    db.commit()
    db.refresh(link)

    return link


@router.delete("/social-media/{link_id}", response_model=MessageResponse)
def delete_social_media_link(
    link_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    link = get_owned_child(db, principal, SocialMediaLink, link_id, LABEL)
    restaurant_id = link.restaurant_id
    platform = link.platform

    db.delete(link)
    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.DELETE,
        entity_type=ENTITY_SOCIAL_MEDIA_LINK,
        entity_id=link_id,
        restaurant_id=restaurant_id,
        details={"platform": platform},
    )
    db.commit()

    return MessageResponse(message="Social media link deleted successfully")
