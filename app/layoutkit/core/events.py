"""Monitoring events emitted by layoutkit operations.

Operations report notable occurrences as immutable MonitoringEvent
objects. Callers may pass an observer callback to receive them as they
happen; every event is also recorded on the operation's result and
mirrored to the standard logging module.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Severity of a monitoring event.

    Attributes:
        INFO: Something was created or completed.
        WARN: Non-fatal problem, such as a missing template key.
        ERROR: The operation was aborted.
        DEBUG: Fine-grained progress information.
    """

    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    DEBUG = "debug"


_LOG_LEVELS: dict[Severity, int] = {
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.DEBUG: logging.DEBUG,
}


@dataclass(frozen=True, slots=True)
class MonitoringEvent:
    """A single fire-and-forget notification.

    Attributes:
        severity: Event severity.
        message: Human-readable description.
        data: Optional structured payload (e.g. {"error": exc}).
    """

    severity: Severity
    message: str
    data: dict[str, Any] | None = None

    @property
    def log_level(self) -> int:
        """Logging level matching this event's severity."""
        return _LOG_LEVELS[self.severity]


Observer = Callable[[MonitoringEvent], None]


@dataclass(slots=True)
class Monitor:
    """Dispatches events to an optional observer and records them.

    Observer exceptions are not caught: observers must not raise.

    Attributes:
        observer: Optional callback invoked synchronously per event.
        log: Logger that mirrors every event.
        events: Events emitted so far, in emission order.
    """

    observer: Observer | None = None
    log: logging.Logger = logger
    events: list[MonitoringEvent] = field(default_factory=list)

    def emit(
        self,
        severity: Severity,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> MonitoringEvent:
        """Create an event, record it, log it and notify the observer."""
        event = MonitoringEvent(severity=severity, message=message, data=data)
        self.log.log(event.log_level, "%s", message)
        self.record(event)
        return event

    def record(self, event: MonitoringEvent) -> None:
        """Record an already logged event and notify the observer."""
        self.events.append(event)
        if self.observer is not None:
            self.observer(event)

    def info(self, message: str, data: dict[str, Any] | None = None) -> MonitoringEvent:
        return self.emit(Severity.INFO, message, data)

    def warn(self, message: str, data: dict[str, Any] | None = None) -> MonitoringEvent:
        return self.emit(Severity.WARN, message, data)

    def error(self, message: str, data: dict[str, Any] | None = None) -> MonitoringEvent:
        return self.emit(Severity.ERROR, message, data)

    def debug(self, message: str, data: dict[str, Any] | None = None) -> MonitoringEvent:
        return self.emit(Severity.DEBUG, message, data)

    def as_observer(self) -> Observer:
        """Return a callback that records events in this monitor.

        Used to forward a nested operation's events into the caller's
        event log; the nested operation has already logged them.
        """
        return self.record
