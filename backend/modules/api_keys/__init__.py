"""
API keys module.

Long-lived bearer credentials for administrative and API access.

Public API:
- IApiKeyService: Validation and key management
- ApiKeyAuthGate: Client-side gate with durable key storage
- FileKeyStore, MemoryKeyStore: Key storage backends
"""

from .interfaces import IApiKeyService, IKeyStore
from .gate import ApiKeyAuthGate
from .models import ApiKey, ApiKeyAuthState, ApiKeyStatus, ApiKeyValidation, ApiKeyView
from .store import FileKeyStore, MemoryKeyStore
from .exceptions import (
    MissingApiKeyError,
    InvalidApiKeyError,
    ApiKeyNotFoundError,
    ApiKeyAccessDeniedError,
    ApiKeyNameRequiredError,
)

__all__ = [
    "IApiKeyService",
    "IKeyStore",
    "ApiKeyAuthGate",
    "ApiKey",
    "ApiKeyAuthState",
    "ApiKeyStatus",
    "ApiKeyValidation",
    "ApiKeyView",
    "FileKeyStore",
    "MemoryKeyStore",
    "MissingApiKeyError",
    "InvalidApiKeyError",
    "ApiKeyNotFoundError",
    "ApiKeyAccessDeniedError",
    "ApiKeyNameRequiredError",
]
