"""Receiver capability: anything a Publisher can deliver messages to."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from eventmsg.message import Message

Listener = Callable[["Message"], None]


class Receiver(ABC):
    """Abstract base class for objects that accept delivered messages."""

    @abstractmethod
    def deliver(self, message: "Message") -> None:
        """Handle a message delivered by a publisher. Must be implemented by subclasses."""
        pass
