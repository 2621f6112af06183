"""In-memory counters and gauges for publish and delivery activity."""

from typing import Dict


class Metrics:
    """Counter/gauge collector shared by publishers and subscribers."""

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._gauges: Dict[str, int] = {}

    def increment(self, name: str, value: int = 1) -> None:
        self._counters[name] = self._counters.get(name, 0) + value

    def set_gauge(self, name: str, value: int) -> None:
        self._gauges[name] = value

    def get_counter(self, name: str) -> int:
        return self._counters.get(name, 0)

    def get_gauge(self, name: str) -> int:
        return self._gauges.get(name, 0)

    def reset(self) -> None:
        self._counters.clear()
        self._gauges.clear()

    def snapshot(self) -> Dict[str, Dict[str, int]]:
        """Return a copy of all counters and gauges."""
        return {
            "counters": dict(self._counters),
            "gauges": dict(self._gauges),
        }
