"""In-memory gazetteer backed by plain dicts."""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from idcn.gazetteer.base import Gazetteer
from idcn.gazetteer.models import Area, TimelineEntry


def _most_recent_first(entries: Sequence[TimelineEntry]) -> tuple[TimelineEntry, ...]:
    """Order dated entries by start year, newest first.

    Undated entries keep the position the data source gave them, so an open
    current period listed first stays first.
    """
    ordered = list(entries)
    slots = [i for i, entry in enumerate(ordered) if entry.start_year is not None]
    dated = sorted((ordered[i] for i in slots), key=lambda e: e.start_year, reverse=True)
    for i, entry in zip(slots, dated):
        ordered[i] = entry
    return tuple(ordered)


class InMemoryGazetteer(Gazetteer):
    """Gazetteer over immutable in-memory tables.

    Tables are copied and frozen on construction, so one instance can be
    shared between threads without locking.

    Example:
        >>> gaz = InMemoryGazetteer(current={110000: "北京市"})
        >>> gaz.current_name(110000)
        '北京市'
    """

    def __init__(
        self,
        current: Optional[Mapping[int, str]] = None,
        timeline: Optional[Mapping[int, Sequence[TimelineEntry]]] = None,
        history: Optional[Mapping[int, Area]] = None,
    ) -> None:
        self._current = MappingProxyType(dict(sorted((current or {}).items())))
        self._timeline = MappingProxyType(
            {
                code: _most_recent_first(entries)
                for code, entries in (timeline or {}).items()
            }
        )
        self._history = MappingProxyType(dict(history or {}))
        self._codes = tuple(self._current.keys())

    def current_name(self, code: int) -> Optional[str]:
        return self._current.get(code)

    def timeline(self, code: int) -> Sequence[TimelineEntry]:
        return self._timeline.get(code, ())

    def historical_area(self, code: int) -> Optional[Area]:
        return self._history.get(code)

    def current_codes(self) -> Iterable[int]:
        return self._codes

    def __len__(self) -> int:
        return len(self._current)

    def __repr__(self) -> str:
        return (
            f"InMemoryGazetteer(current={len(self._current)}, "
            f"timeline={len(self._timeline)}, history={len(self._history)})"
        )
