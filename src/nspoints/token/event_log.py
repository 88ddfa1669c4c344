"""
EventLog: Журнал зафиксированных событий

Фасад добавляет события только после успешного завершения вызова, поэтому
журнал никогда не содержит событий отклонённых вызовов. Порядок записей
совпадает с порядком вызовов (вызовы сериализованы).
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Type, TypeVar

from nspoints.core.domain.events import TokenEvent

E = TypeVar("E", bound=TokenEvent)


@dataclass(frozen=True)
class LoggedEvent:
    """Событие с позицией в журнале."""

    index: int
    call_id: int
    event: TokenEvent


class EventLog:
    def __init__(self):
        self._entries: List[LoggedEvent] = []
        self._call_seq = 0

    def record(self, events: Iterable[TokenEvent]) -> int:
        """
        Фиксация событий одного вызова.

        Returns:
            Идентификатор вызова (монотонный, начиная с 1)
        """
        self._call_seq += 1
        for event in events:
            self._entries.append(
                LoggedEvent(index=len(self._entries), call_id=self._call_seq, event=event)
            )
        return self._call_seq

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TokenEvent]:
        return (entry.event for entry in self._entries)

    @property
    def entries(self) -> Tuple[LoggedEvent, ...]:
        return tuple(self._entries)

    def of_type(self, event_type: Type[E]) -> List[E]:
        return [e.event for e in self._entries if isinstance(e.event, event_type)]  # type: ignore[misc]

    def for_call(self, call_id: int) -> List[TokenEvent]:
        return [e.event for e in self._entries if e.call_id == call_id]

    def last(self) -> Optional[TokenEvent]:
        return self._entries[-1].event if self._entries else None
