"""Message record passed from publishers to subscribers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True, eq=False)
class Message:
    """A single published item. Immutable; equality is identity."""

    content: str
    message_type: str
    sender_name: str
    timestamp: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        """Text form used for history and display, e.g. `[15:30:45] Haber TV (Haber): ...`."""
        return f"[{self.timestamp:%H:%M:%S}] {self.sender_name} ({self.message_type}): {self.content}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize message for logging."""
        return {
            "content": self.content,
            "message_type": self.message_type,
            "sender_name": self.sender_name,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        return self.render()
