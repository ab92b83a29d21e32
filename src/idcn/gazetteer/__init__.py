"""Region code data sources."""

from idcn.gazetteer.base import Gazetteer
from idcn.gazetteer.memory import InMemoryGazetteer
from idcn.gazetteer.models import Area, TimelineEntry

__all__ = [
    "Area",
    "Gazetteer",
    "InMemoryGazetteer",
    "TimelineEntry",
]
