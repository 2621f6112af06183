"""In-process publish/subscribe with per-subscriber message type filtering."""

from eventmsg.errors import EventMessagingError, InvalidArgumentError, ListenerFailureError
from eventmsg.message import Message
from eventmsg.publisher import Publisher
from eventmsg.receiver import Listener, Receiver
from eventmsg.subscriber import Subscriber

__all__ = [
    "Message",
    "Publisher",
    "Subscriber",
    "Receiver",
    "Listener",
    "EventMessagingError",
    "InvalidArgumentError",
    "ListenerFailureError",
]
