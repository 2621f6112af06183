"""Publisher: builds messages, keeps a history, and notifies listeners in registration order."""

import threading
from typing import List, Optional, Tuple

from eventmsg.config import get_settings
from eventmsg.errors import InvalidArgumentError, ListenerFailureError
from eventmsg.message import Message
from eventmsg.observability import Metrics, get_logger
from eventmsg.receiver import Listener


class Publisher:
    """Named message source with an ordered listener list and an append-only history."""

    def __init__(
        self,
        name: str,
        *,
        deduplicate_listeners: Optional[bool] = None,
        reject_empty: Optional[bool] = None,
        metrics: Optional[Metrics] = None,
    ) -> None:
        settings = get_settings()
        self._name = name
        self._listeners: List[Listener] = []
        self._history: List[str] = []
        self._deduplicate = (
            settings.deduplicate_listeners if deduplicate_listeners is None else deduplicate_listeners
        )
        self._reject_empty = settings.reject_empty if reject_empty is None else reject_empty
        self._metrics = metrics if metrics is not None else Metrics()
        # Re-entrant so a listener may publish on the same publisher.
        self._lock = threading.RLock()
        self._logger = get_logger(f"eventmsg.publisher.{name}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def history(self) -> Tuple[str, ...]:
        """Rendered text of every message published, oldest first."""
        with self._lock:
            return tuple(self._history)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    def add_listener(self, listener: Listener) -> bool:
        """
        Append a listener. The same listener may be registered more than once and is
        then called once per registration, unless deduplication is enabled.
        Returns False only when deduplication skipped the registration.
        """
        with self._lock:
            if self._deduplicate and listener in self._listeners:
                return False
            self._listeners.append(listener)
            self._metrics.set_gauge("listeners", len(self._listeners))
            return True

    def remove_listener(self, listener: Listener) -> bool:
        """Remove the most recent registration of listener. Returns False if it was not registered."""
        with self._lock:
            for index in range(len(self._listeners) - 1, -1, -1):
                if self._listeners[index] == listener:
                    del self._listeners[index]
                    self._metrics.set_gauge("listeners", len(self._listeners))
                    return True
            return False

    def publish(self, content: str, message_type: str) -> Message:
        """
        Create a message from this publisher, record it in history, and call every
        registered listener with it in registration order.
        A failing listener stops delivery and is re-raised as ListenerFailureError;
        the history entry is kept.
        """
        self._validate("content", content)
        self._validate("message_type", message_type)
        with self._lock:
            message = Message(content=content, message_type=message_type, sender_name=self._name)
            self._history.append(message.render())
            self._metrics.increment("messages_published")
            self.on_publish(message)
            listeners = list(self._listeners)
            if not listeners:
                self._logger.debug("no_listeners", extra={"publisher": self._name})
                return message
            for listener in listeners:
                try:
                    listener(message)
                except Exception as e:
                    self._metrics.increment("listener_failures")
                    self._logger.exception(
                        "delivery_failed",
                        extra={
                            "publisher": self._name,
                            "message_type": message.message_type,
                            "error": str(e),
                        },
                    )
                    raise ListenerFailureError(message, listener) from e
                self._metrics.increment("listener_notifications")
        return message

    def on_publish(self, message: Message) -> None:
        """Called after a message is recorded, before listeners run (for observability)."""
        self._logger.info(
            "published",
            extra={
                "publisher": self._name,
                "message_type": message.message_type,
                "listener_count": len(self._listeners),
            },
        )

    def _validate(self, argument: str, value: object) -> None:
        if not isinstance(value, str):
            raise InvalidArgumentError(argument, f"expected str, got {type(value).__name__}")
        if self._reject_empty and not value.strip():
            raise InvalidArgumentError(argument, "must not be empty")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, listeners={len(self._listeners)})"
