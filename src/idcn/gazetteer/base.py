"""
Gazetteer capability interface.

The address resolver and the generator only ever read region data through
this interface, so any table source (bundled YAML, a database, a test
fixture) can be plugged in.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from idcn.gazetteer.models import Area, TimelineEntry


class Gazetteer(ABC):
    """Read-only region code lookups across three data epochs."""

    @abstractmethod
    def current_name(self, code: int) -> Optional[str]:
        """Name of a code in the current administrative map, if any."""

    @abstractmethod
    def timeline(self, code: int) -> Sequence[TimelineEntry]:
        """Past names of a code, most recent first. Empty if none."""

    @abstractmethod
    def historical_area(self, code: int) -> Optional[Area]:
        """Full {province, city, district} triple from the archival snapshot."""

    @abstractmethod
    def current_codes(self) -> Iterable[int]:
        """All codes of the current map, in ascending order."""

    def historical_name(self, code: int) -> str:
        """Most specific tier name of a code in the archival snapshot."""
        area = self.historical_area(code)
        if area is None:
            return ""
        return area.most_specific()

    def find_code(self, name: str) -> Optional[int]:
        """First current code (ascending) whose name equals name exactly."""
        for code in self.current_codes():
            if self.current_name(code) == name:
                return code
        return None
