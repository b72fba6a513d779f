"""
Session auth gate.

Tracks the signed-in identity for one application root. The state is
loaded from the auth provider's session store on start() and kept current
through the provider's auth-state-change notifications. Create one
instance per root and pass it to whatever needs it.
"""

import logging
from typing import Any, Callable, Optional

from modules.activity.interfaces import IActivityLogger
from modules.activity.models import LogCategory

from .models import Identity, SessionSnapshot

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionSnapshot], None]

SIGNED_OUT = "SIGNED_OUT"


class SessionStateService:
    """
    Process-wide view of the current auth session.

    Consumers should not act on the identity while snapshot().is_loading
    is true.
    """

    def __init__(self, auth_client: Any, activity: IActivityLogger):
        """
        Args:
            auth_client: The Supabase auth client (``client.auth``).
            activity: Sink for session activity records.
        """
        self._auth = auth_client
        self._activity = activity
        self._snapshot = SessionSnapshot()
        self._listeners: list[SessionListener] = []
        self._subscription: Any = None

    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def identity(self) -> Optional[Identity]:
        return self._snapshot.identity

    @property
    def is_loading(self) -> bool:
        return self._snapshot.is_loading

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener for every new snapshot.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def start(self) -> SessionSnapshot:
        """
        Restore the current session and start listening for auth events.

        A failure while reading the session leaves the gate signed out.
        """
        if self._subscription is None:
            self._subscription = self._auth.on_auth_state_change(self._on_auth_state_change)

        identity: Optional[Identity] = None
        try:
            identity = Identity.from_session(self._auth.get_session())
        except Exception as e:
            logger.error(f"Error checking auth session: {e}")

        self._publish(identity)

        if identity is not None:
            self._activity.log(
                identity.id,
                LogCategory.AUTH,
                "session_restored",
                {"email": identity.email},
            )

        return self._snapshot

    async def sign_out(self) -> None:
        """Sign out through the provider; the SIGNED_OUT event updates state."""
        self._auth.sign_out()

    def close(self) -> None:
        """Stop listening for auth events."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def _on_auth_state_change(self, event: str, session: Any) -> None:
        previous = self._snapshot.identity
        self._publish(Identity.from_session(session))

        if event == SIGNED_OUT and previous is not None:
            self._activity.log(
                previous.id,
                LogCategory.AUTH,
                "signed_out",
                {"email": previous.email},
            )

    def _publish(self, identity: Optional[Identity]) -> None:
        self._snapshot = SessionSnapshot(identity=identity, is_loading=False)
        for listener in list(self._listeners):
            try:
                listener(self._snapshot)
            except Exception:
                logger.exception("Session listener failed")
