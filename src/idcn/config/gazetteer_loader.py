"""YAML loader for gazetteer tables.

Region tables are kept as data, so administrative boundary updates never
require a code change.

Example YAML document:

    current:
      110000: 北京市
      110100: 北京市
      110101: 东城区
    timeline:
      110104:
        - name: 宣武区
          start_year: 1958
          end_year: 2010
    history:
      110103:
        province: 北京市
        city: 北京市
        district: 崇文区
"""

from pathlib import Path
from typing import Any, Optional

import yaml

from idcn.gazetteer.memory import InMemoryGazetteer
from idcn.gazetteer.models import Area, TimelineEntry
from idcn.logging.setup import get_logger

logger = get_logger(__name__)


def _parse_code(raw: Any, section: str) -> int:
    """Parse a region code key; YAML may hand back an int or a string."""
    text = str(raw).strip()
    if len(text) != 6 or not text.isascii() or not text.isdigit():
        raise ValueError(f"Invalid region code in {section}: {raw!r}")
    return int(text)


def _optional_year(value: Any, code: int, field_name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Timeline {code:06d} {field_name} must be an integer, got {value!r}")
    return value


def _parse_current(data: Any) -> dict[int, str]:
    if not isinstance(data, dict):
        raise ValueError(f"Invalid current structure: expected dict, got {type(data).__name__}")

    current = {}
    for raw_code, name in data.items():
        code = _parse_code(raw_code, "current")
        if not isinstance(name, str):
            raise ValueError(f"Current {code:06d} name must be a string, got {type(name).__name__}")
        current[code] = name
    return current


def _parse_timeline(data: Any) -> dict[int, list[TimelineEntry]]:
    if not isinstance(data, dict):
        raise ValueError(f"Invalid timeline structure: expected dict, got {type(data).__name__}")

    timeline = {}
    for raw_code, entries in data.items():
        code = _parse_code(raw_code, "timeline")
        if not isinstance(entries, list):
            raise ValueError(
                f"Timeline {code:06d} is not a list: {type(entries).__name__}"
            )

        parsed = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"Timeline {code:06d} entry {i} is not a dict")
            if "name" not in entry:
                raise ValueError(f"Timeline {code:06d} entry {i} missing required field: name")
            parsed.append(
                TimelineEntry(
                    name=str(entry["name"]),
                    start_year=_optional_year(entry.get("start_year"), code, "start_year"),
                    end_year=_optional_year(entry.get("end_year"), code, "end_year"),
                )
            )
        timeline[code] = parsed
    return timeline


def _parse_history(data: Any) -> dict[int, Area]:
    if not isinstance(data, dict):
        raise ValueError(f"Invalid history structure: expected dict, got {type(data).__name__}")

    history = {}
    for raw_code, area in data.items():
        code = _parse_code(raw_code, "history")
        if not isinstance(area, dict):
            raise ValueError(f"History {code:06d} is not a dict: {type(area).__name__}")
        if "province" not in area:
            raise ValueError(f"History {code:06d} missing required field: province")
        history[code] = Area(
            province=str(area["province"]),
            city=str(area.get("city") or ""),
            district=str(area.get("district") or ""),
        )
    return history


def load_gazetteer_from_yaml(path: Path | str) -> InMemoryGazetteer:
    """Load gazetteer tables from a YAML file.

    Args:
        path: Path to the YAML document.

    Returns:
        An InMemoryGazetteer over the loaded tables. Missing sections are
        treated as empty.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the YAML structure is invalid.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Gazetteer file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return InMemoryGazetteer()

    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML structure: expected dict, got {type(data).__name__}")

    gazetteer = InMemoryGazetteer(
        current=_parse_current(data.get("current") or {}),
        timeline=_parse_timeline(data.get("timeline") or {}),
        history=_parse_history(data.get("history") or {}),
    )

    logger.debug(
        "Gazetteer loaded",
        extra={"event": "gazetteer_loaded", "path": str(path), "tables": repr(gazetteer)},
    )
    return gazetteer


def load_gazetteer_from_yaml_safe(
    path: Path | str,
) -> tuple[Optional[InMemoryGazetteer], Optional[str]]:
    """Load a gazetteer, returning any error as a message instead of raising.

    Returns:
        Tuple of (gazetteer, error_message). On failure gazetteer is None.
    """
    try:
        return load_gazetteer_from_yaml(path), None
    except FileNotFoundError as e:
        return None, str(e)
    except ValueError as e:
        return None, f"Configuration error: {e}"
    except yaml.YAMLError as e:
        return None, f"YAML parsing error: {e}"
