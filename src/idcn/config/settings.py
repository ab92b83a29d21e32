"""Environment-driven settings."""

import os
from pathlib import Path
from typing import Optional

# Bundled tables shipped inside the package
DEFAULT_GAZETTEER_PATH = Path(__file__).resolve().parent.parent / "gazetteer" / "data" / "gazetteer.yaml"


def get_gazetteer_path() -> Path:
    """Path of the gazetteer YAML, overridable with IDCN_GAZETTEER_PATH."""
    override = os.getenv("IDCN_GAZETTEER_PATH")
    if override:
        return Path(override)
    return DEFAULT_GAZETTEER_PATH


def get_generator_seed() -> Optional[int]:
    """Seed for the default generator from IDCN_GENERATOR_SEED.

    Returns:
        The integer seed, or None when unset (OS entropy is used).

    Raises:
        ValueError: If the variable is set but is not an integer.
    """
    raw = os.getenv("IDCN_GENERATOR_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"IDCN_GENERATOR_SEED must be an integer, got: {raw}") from None
