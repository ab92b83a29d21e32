"""Value types shared by the gazetteer and the address resolver."""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Area:
    """A resolved administrative area.

    Tiers are filled top-down. A municipality directly under the central
    government may have an empty city while province holds its name.
    """

    province: str
    city: str = ""
    district: str = ""

    @classmethod
    def empty(cls) -> "Area":
        return cls(province="")

    def is_empty(self) -> bool:
        return not (self.province or self.city or self.district)

    def most_specific(self) -> str:
        """Return the lowest non-empty tier name."""
        return self.district or self.city or self.province

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class TimelineEntry:
    """One historical name of a region code and the years it was in use."""

    name: str
    start_year: Optional[int] = None
    end_year: Optional[int] = None
