"""Configuration module for idcn."""

from idcn.config.gazetteer_loader import (
    load_gazetteer_from_yaml,
    load_gazetteer_from_yaml_safe,
)
from idcn.config.settings import get_gazetteer_path, get_generator_seed

__all__ = [
    "get_gazetteer_path",
    "get_generator_seed",
    "load_gazetteer_from_yaml",
    "load_gazetteer_from_yaml_safe",
]
