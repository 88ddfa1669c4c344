"""Token: внешний интерфейс NSPOINTS и журнал событий."""

from .event_log import EventLog, LoggedEvent
from .facade import NSPoints

__all__ = [
    "NSPoints",
    "EventLog",
    "LoggedEvent",
]
