import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class AuthEvent(str, enum.Enum):
    SIGNED_IN = "signed_in"
    SIGNED_OUT = "signed_out"
    TOKEN_REFRESHED = "token_refreshed"
    USER_UPDATED = "user_updated"


@dataclass(frozen=True)
class SessionChange:
    event: AuthEvent
    user_id: Optional[int]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


SessionListener = Callable[[SessionChange], None]


class SessionEvents:
    """Application-wide auth state notifications.

    Built once at startup and kept on ``app.state``. Listeners are called
    synchronously in registration order; a failing listener is logged and
    the remaining ones still run. After :meth:`teardown` the object is
    inert: emits are ignored and new subscriptions are refused.
    """

    def __init__(self) -> None:
        self._listeners: List[SessionListener] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it"""
        if self._closed:
            raise RuntimeError("Session events have been torn down")
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: AuthEvent, user_id: Optional[int] = None) -> Optional[SessionChange]:
        """Notify every listener of a session change"""
        if self._closed:
            logger.debug("Dropping %s for user %s after teardown", event.value, user_id)
            return None

        change = SessionChange(event=event, user_id=user_id)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Session listener failed on %s", event.value)
        return change

    def teardown(self) -> None:
        """Drop all listeners; further emits become no-ops"""
        logger.info("Tearing down session events (%d listeners)", len(self._listeners))
        self._listeners.clear()
        self._closed = True


def log_session_change(change: SessionChange) -> None:
    logger.info("Auth state changed: %s user=%s", change.event.value, change.user_id)
