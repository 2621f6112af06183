"""Subscriber: declares interests, joins publishers, and keeps the messages that pass its filter."""

from typing import TYPE_CHECKING, FrozenSet, List, Optional, Set, Tuple

from eventmsg.message import Message
from eventmsg.observability import Metrics, get_logger
from eventmsg.receiver import Receiver

if TYPE_CHECKING:
    from eventmsg.publisher import Publisher


class Subscriber(Receiver):
    """
    Receiver with an interest set and an inbox.
    An empty interest set means every delivered message is kept.
    """

    def __init__(self, name: str, *, metrics: Optional[Metrics] = None) -> None:
        self._name = name
        self._interests: Set[str] = set()
        self._inbox: List[Message] = []
        self._metrics = metrics if metrics is not None else Metrics()
        self._logger = get_logger(f"eventmsg.subscriber.{name}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def interests(self) -> FrozenSet[str]:
        return frozenset(self._interests)

    @property
    def received_messages(self) -> Tuple[Message, ...]:
        """Accepted messages in the order they arrived."""
        return tuple(self._inbox)

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    def add_interest(self, message_type: str) -> None:
        """Add message_type to the interest set; already-present types are ignored."""
        if message_type in self._interests:
            return
        self._interests.add(message_type)
        self._logger.info(
            "interest_added",
            extra={"subscriber": self._name, "message_type": message_type},
        )

    def subscribe_to(self, publisher: "Publisher") -> None:
        """Register this subscriber with publisher. Subscribing twice means two deliveries per publish."""
        if publisher.add_listener(self.deliver):
            self.on_subscribe(publisher)

    def unsubscribe_from(self, publisher: "Publisher") -> bool:
        """Remove one registration from publisher. Returns False if none was found."""
        removed = publisher.remove_listener(self.deliver)
        if removed:
            self.on_unsubscribe(publisher)
        return removed

    def accepts(self, message: Message) -> bool:
        return not self._interests or message.message_type in self._interests

    def deliver(self, message: Message) -> None:
        """Keep message if it passes the interest filter, otherwise drop it."""
        if not self.accepts(message):
            self._metrics.increment("messages_filtered")
            self._logger.debug(
                "message_filtered",
                extra={"subscriber": self._name, "message_type": message.message_type},
            )
            return
        self._inbox.append(message)
        self._metrics.increment("messages_accepted")
        self._logger.info(
            "message_received",
            extra={
                "subscriber": self._name,
                "sender": message.sender_name,
                "message_type": message.message_type,
            },
        )

    def on_subscribe(self, publisher: "Publisher") -> None:
        """Called when this subscriber is added to a publisher (for observability)."""
        self._logger.info(
            "subscribed",
            extra={"publisher": publisher.name, "subscriber": self._name},
        )

    def on_unsubscribe(self, publisher: "Publisher") -> None:
        """Called when this subscriber is removed from a publisher (for observability)."""
        self._logger.info(
            "unsubscribed",
            extra={"publisher": publisher.name, "subscriber": self._name},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"
