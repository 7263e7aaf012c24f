from datetime import datetime
from typing import Any, Optional

from menuhub.models.activity_log import ActivityAction
from menuhub.schemas.base import CamelModel


class ActivityLogResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    action: ActivityAction
    entity_type: str
    entity_id: int
    restaurant_id: Optional[int] = None
    details: dict[str, Any]
    created_at: datetime
