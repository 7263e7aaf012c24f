from datetime import datetime

from pydantic import Field

from menuhub.models.qr_code import QRCode
from menuhub.schemas.base import CamelModel


class QRCodeCreate(CamelModel):
    label: str = Field(min_length=1, max_length=255)


class QRCodeResponse(CamelModel):
    id: int
    label: str
    restaurant_id: int
    created_at: datetime
    # Payload to encode in the printed code
    menu_url: str

    @classmethod
    def from_model(cls, qr_code: QRCode, base_url: str) -> "QRCodeResponse":
        return cls(
            id=qr_code.id,
            label=qr_code.label,
            restaurant_id=qr_code.restaurant_id,
            created_at=qr_code.created_at,
            menu_url=public_menu_url(base_url, qr_code.restaurant_id),
        )


def public_menu_url(base_url: str, restaurant_id: int) -> str:
    return f"{base_url.rstrip('/')}/menus/{restaurant_id}"
