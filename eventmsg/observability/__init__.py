"""Observability: logging and metrics for the event messaging core."""

from eventmsg.observability.logger import get_logger
from eventmsg.observability.metrics import Metrics

__all__ = ["get_logger", "Metrics"]
