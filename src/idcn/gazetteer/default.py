"""Process-wide default gazetteer."""

import functools

from idcn.config.gazetteer_loader import load_gazetteer_from_yaml
from idcn.config.settings import get_gazetteer_path
from idcn.gazetteer.memory import InMemoryGazetteer


@functools.lru_cache(maxsize=1)
def get_default_gazetteer() -> InMemoryGazetteer:
    """Load the configured gazetteer once and share it.

    The tables are immutable, so the cached instance is safe to read from
    any thread. Call ``get_default_gazetteer.cache_clear()`` after changing
    IDCN_GAZETTEER_PATH.
    """
    return load_gazetteer_from_yaml(get_gazetteer_path())
