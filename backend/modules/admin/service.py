"""
Admin service.

Identity provisioning and deletion go through the Supabase Auth admin API
(service role). Read-only statistics and listings back the admin-api
endpoints.
"""

import logging
import secrets
from typing import Optional

from supabase import Client

from shared.exceptions import ExternalServiceError
from shared.models import ClientContext
from modules.activity.interfaces import IActivityLogger
from modules.activity.models import LogCategory
from modules.auth.exceptions import AdminRequiredError
from modules.auth.interfaces import IAuthService
from modules.auth.models import UserRole
from modules.auth.repository import ProfileRepository, RoleRepository

from .models import AdminStats, CreateAdminRequest, Pass, UserListResponse
from .repository import PassRepository
from .exceptions import (
    AdminSetupDisabledError,
    InvalidSetupTokenError,
    PassNotFoundError,
    UserIdRequiredError,
)

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(
        self,
        db: Client,
        auth: IAuthService,
        activity: IActivityLogger,
        setup_token: Optional[str] = None,
    ):
        self._db = db
        self._auth = auth
        self._activity = activity
        self._setup_token = setup_token
        self._roles = RoleRepository(db)
        self._profiles = ProfileRepository(db)
        self._passes = PassRepository(db)

    async def provision_admin(self, setup_token: Optional[str], request: CreateAdminRequest) -> str:
        """
        Create an administrator identity.

        Guarded by the environment-injected setup token; there are no
        built-in credentials.

        Returns:
            The new identity's ID.
        """
        if not self._setup_token:
            raise AdminSetupDisabledError()
        if not setup_token or not secrets.compare_digest(setup_token, self._setup_token):
            raise InvalidSetupTokenError()

        try:
            response = self._db.auth.admin.create_user(
                {
                    "email": request.email,
                    "password": request.password,
                    "email_confirm": True,
                    "user_metadata": {"name": request.display_name},
                }
            )
            user_id = str(response.user.id)
            self._roles.assign_role(user_id, UserRole.ADMIN)
        except Exception as e:
            raise ExternalServiceError(str(e), service="supabase", code="ADMIN_CREATE_FAILED") from e

        logger.info(f"Provisioned admin identity {user_id}")
        self._activity.log(
            user_id,
            LogCategory.ADMIN,
            "admin_created",
            {"email": request.email},
        )
        return user_id

    async def delete_user(
        self,
        caller_token: str,
        target_user_id: Optional[str],
        context: Optional[ClientContext] = None,
    ) -> None:
        """
        Delete an identity on behalf of an admin caller.

        Raises:
            AuthenticationError: Caller token is missing or invalid
            AdminRequiredError: Caller is not an admin
            UserIdRequiredError: No target given
        """
        caller = await self._auth.validate_token(caller_token)

        if not await self._auth.is_admin(caller.id):
            raise AdminRequiredError(caller.id)

        if not target_user_id:
            raise UserIdRequiredError()

        try:
            self._db.auth.admin.delete_user(target_user_id)
        except Exception as e:
            raise ExternalServiceError(str(e), service="supabase", code="USER_DELETE_FAILED") from e

        self._activity.log(
            caller.id,
            LogCategory.ADMIN,
            "delete_user",
            {"target_user_id": target_user_id},
            context,
        )

    async def get_stats(self) -> AdminStats:
        return AdminStats(
            total_users=self._profiles.count(),
            active_passes=self._profiles.count(has_pass=True),
        )

    async def list_users(self, limit: int = 10, offset: int = 0) -> UserListResponse:
        profiles, total = self._profiles.list_page(limit, offset)
        return UserListResponse(data=profiles, total=total)

    async def list_passes(self) -> list[Pass]:
        return self._passes.list_passes()

    async def get_pass(self, pass_id: str) -> Pass:
        found = self._passes.get_by_id(pass_id)
        if found is None:
            raise PassNotFoundError(pass_id)
        return found
