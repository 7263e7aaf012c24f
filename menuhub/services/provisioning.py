"""
Provisioning: the super admin's "add restaurant" action.

Creates (or resolves) a restaurant admin and the restaurant tied to it as a
single unit of work. Either both rows and their audit entries are committed,
or nothing is.
"""
import logging
from typing import Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from menuhub.core.exceptions import ConflictError
from menuhub.core.permissions import Principal, require_super_admin
from menuhub.models.activity_log import ActivityAction
from menuhub.models.restaurant import Restaurant
from menuhub.models.user import User, UserRole
from menuhub.schemas.restaurant import ProvisionRequest
from menuhub.services.accounts import build_user, ensure_assignable_admin, ensure_username_available
from menuhub.services.activity import ENTITY_RESTAURANT, ENTITY_USER, record_activity

logger = logging.getLogger(__name__)


class ProvisioningService:
    """
    Service creating a restaurant together with its admin account.

    The one-restaurant-per-admin rule is checked up front for a readable
    error, and enforced by the unique index on ``restaurants.admin_id`` for
    concurrent requests that slip past the check.
    """

    def __init__(self, db: Session):
        self.db = db

    def provision(self, actor: Principal, request: ProvisionRequest) -> Tuple[Restaurant, User]:
        """
        Args:
            actor: Super admin performing the action
            request: Restaurant attributes plus new admin credentials or an existing admin id

        Returns:
            The committed restaurant and its admin
        """
        require_super_admin(actor)

        try:
            admin = self._resolve_admin(actor, request)

            restaurant = Restaurant(admin=admin, **request.restaurant.model_dump(mode="json"))
            self.db.add(restaurant)
            self.db.flush()

            record_activity(
                self.db,
                actor_id=actor.id,
                action=ActivityAction.CREATE,
                entity_type=ENTITY_RESTAURANT,
                entity_id=restaurant.id,
                restaurant_id=restaurant.id,
                details={"name": restaurant.name, "adminId": admin.id},
            )

            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Provisioning rejected by database constraint: %s", exc.orig)
            raise ConflictError("Restaurant admin or username is already in use") from exc
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(restaurant)
        self.db.refresh(admin)
        logger.info(
            "Provisioned restaurant %d (%r) for admin %d by user %d",
            restaurant.id, restaurant.name, admin.id, actor.id,
        )
        return restaurant, admin

    def _resolve_admin(self, actor: Principal, request: ProvisionRequest) -> User:
        if request.admin_id is not None:
            return ensure_assignable_admin(self.db, request.admin_id)

        credentials = request.admin
        ensure_username_available(self.db, credentials.username)

        admin = build_user(
            username=credentials.username,
            password=credentials.password,
            name=credentials.name,
            email=credentials.email,
            role=UserRole.RESTAURANT_ADMIN,
        )
        self.db.add(admin)
        self.db.flush()

        record_activity(
            self.db,
            actor_id=actor.id,
            action=ActivityAction.CREATE,
            entity_type=ENTITY_USER,
            entity_id=admin.id,
            details={"username": admin.username},
        )
        return admin
