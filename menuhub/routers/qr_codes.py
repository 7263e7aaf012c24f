"""
QR code router.

Only labels are stored; each response carries the public menu URL the
printed code should encode.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from menuhub.core.config import get_settings
from menuhub.core.deps import get_principal
from menuhub.core.permissions import Principal, get_owned_child, get_owned_restaurant
from menuhub.db.session import get_db
from menuhub.models.activity_log import ActivityAction
from menuhub.models.qr_code import QRCode
from menuhub.schemas.base import EntityId, MessageResponse
from menuhub.schemas.qr_code import QRCodeCreate, QRCodeResponse
from menuhub.services.activity import ENTITY_QR_CODE, record_activity

router = APIRouter(tags=["qr-codes"])


def to_response(qr_code: QRCode) -> QRCodeResponse:
    return QRCodeResponse.from_model(qr_code, get_settings().public_menu_base_url)


@router.get("/restaurants/{restaurant_id}/qr-codes", response_model=List[QRCodeResponse])
def list_qr_codes(
    restaurant_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    get_owned_restaurant(db, principal, restaurant_id)

    qr_codes = (
        db.query(QRCode)
        .filter(QRCode.restaurant_id == restaurant_id)
        .order_by(QRCode.id.asc())
        .all()
    )
    return [to_response(qr_code) for qr_code in qr_codes]


@router.post(
    "/restaurants/{restaurant_id}/qr-codes",
    response_model=QRCodeResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_qr_code(
    restaurant_id: EntityId,
    qr_data: QRCodeCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    restaurant = get_owned_restaurant(db, principal, restaurant_id)

    qr_code = QRCode(restaurant=restaurant, label=qr_data.label)
    db.add(qr_code)
    db.flush()

    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.CREATE,
        entity_type=ENTITY_QR_CODE,
        entity_id=qr_code.id,
        restaurant_id=restaurant_id,
        details={"label": qr_code.label},
    )
    db.commit()
    db.refresh(qr_code)

    return to_response(qr_code)


@router.get("/qr-codes/{qr_code_id}", response_model=QRCodeResponse)
def get_qr_code(
    qr_code_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    return to_response(get_owned_child(db, principal, QRCode, qr_code_id, "QR code"))


@router.delete("/qr-codes/{qr_code_id}", response_model=MessageResponse)
def delete_qr_code(
    qr_code_id: EntityId,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_principal),
):
    qr_code = get_owned_child(db, principal, QRCode, qr_code_id, "QR code")
    restaurant_id = qr_code.restaurant_id
    label = qr_code.label

    db.delete(qr_code)
    record_activity(
        db,
        actor_id=principal.id,
        action=ActivityAction.DELETE,
        entity_type=ENTITY_QR_CODE,
        entity_id=qr_code_id,
        restaurant_id=restaurant_id,
        details={"label": label},
    )
    db.commit()

    return MessageResponse(message="QR code deleted successfully")
