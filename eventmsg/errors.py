"""Exceptions raised by the event messaging core."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from eventmsg.message import Message
    from eventmsg.receiver import Listener


class EventMessagingError(Exception):
    """Base class for event messaging errors."""


class InvalidArgumentError(EventMessagingError, ValueError):
    """Content or message type passed to publish is unusable."""

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"{argument}: {reason}")
        self.argument = argument
        self.reason = reason


class ListenerFailureError(EventMessagingError):
    """A listener raised while a message was being delivered; later listeners were skipped."""

    def __init__(self, message: "Message", listener: Optional["Listener"] = None) -> None:
        super().__init__(
            f"listener {listener!r} failed on message from {message.sender_name!r} ({message.message_type})"
        )
        self.message = message
        self.listener = listener
