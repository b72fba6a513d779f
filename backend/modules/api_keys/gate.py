"""
API-key auth gate.

Client-side counterpart of the session gate for administrative access:
remembers one key in durable storage, revalidates it on restore, and
exposes the outcome as an ApiKeyAuthState snapshot. Nothing here raises;
every failure degrades to "unauthenticated".
"""

import logging
from typing import Optional

from .interfaces import IApiKeyService, IKeyStore
from .models import ApiKeyAuthState, ApiKeyValidation

logger = logging.getLogger(__name__)


class ApiKeyAuthGate:
    def __init__(self, service: IApiKeyService, store: IKeyStore):
        self._service = service
        self._store = store
        self._state = ApiKeyAuthState()
        self._key_id: Optional[str] = None

    def snapshot(self) -> ApiKeyAuthState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    async def restore(self) -> ApiKeyAuthState:
        """Silently revalidate a previously stored key; purge it if no longer valid."""
        try:
            stored = self._store.get()
        except Exception as e:
            logger.error(f"Could not read stored API key: {e}")
            stored = None

        if not stored:
            self._state = ApiKeyAuthState(is_loading=False)
            return self._state

        result = await self._validate(stored)
        if not result.is_valid:
            self._forget()
        self._key_id = result.key_id if result.is_valid else None
        self._state = self._state_from(result)
        return self._state

    async def authenticate(self, key: str) -> bool:
        """Validate a key and remember it on success, forget any stored key otherwise."""
        self._state = self._state.model_copy(update={"is_loading": True})

        result = await self._validate(key)
        if result.is_valid:
            self._remember(key)
        else:
            self._forget()

        self._key_id = result.key_id if result.is_valid else None
        self._state = self._state_from(result)
        return result.is_valid

    async def revoke(self) -> bool:
        """
        Revoke the remembered key on the backend, then forget it.

        Returns False, keeping the key, when nothing is signed in or the
        backend refused the revocation.
        """
        state = self._state
        if not state.is_authenticated or state.owner_id is None or self._key_id is None:
            return False

        try:
            await self._service.revoke_key(state.owner_id, self._key_id, caller_is_admin=state.is_admin)
        except Exception as e:
            logger.error(f"API key revocation error: {e}")
            return False

        self.sign_out()
        return True

    def sign_out(self) -> None:
        self._forget()
        self._key_id = None
        self._state = ApiKeyAuthState(is_loading=False)

    async def _validate(self, key: str) -> ApiKeyValidation:
        try:
            return await self._service.validate_api_key(key)
        except Exception as e:
            logger.error(f"API key authentication error: {e}")
            return ApiKeyValidation.invalid()

    def _remember(self, key: str) -> None:
        try:
            self._store.set(key)
        except Exception as e:
            logger.error(f"Could not persist API key: {e}")

    def _forget(self) -> None:
        try:
            self._store.clear()
        except Exception as e:
            logger.error(f"Could not clear stored API key: {e}")

    @staticmethod
    def _state_from(result: ApiKeyValidation) -> ApiKeyAuthState:
        if not result.is_valid:
            return ApiKeyAuthState(is_loading=False)
        return ApiKeyAuthState(
            is_authenticated=True,
            is_admin=result.is_admin,
            owner_id=result.owner_id,
            is_loading=False,
        )
