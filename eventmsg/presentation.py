"""Plain-text views of publisher history and subscriber state."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eventmsg.publisher import Publisher
    from eventmsg.subscriber import Subscriber

EMPTY_INBOX = "No messages received yet."


def format_history(publisher: "Publisher") -> str:
    lines = [f"=== {publisher.name} message history ==="]
    lines.extend(publisher.history)
    return "\n".join(lines)


def format_inbox(subscriber: "Subscriber") -> str:
    lines = [f"=== {subscriber.name} received messages ==="]
    messages = subscriber.received_messages
    if not messages:
        lines.append(EMPTY_INBOX)
    else:
        lines.extend(f"  {message.render()}" for message in messages)
    return "\n".join(lines)


def format_interests(subscriber: "Subscriber") -> str:
    """Interests are sorted so the output does not depend on set ordering."""
    return f"{subscriber.name} is interested in: {', '.join(sorted(subscriber.interests))}"
