"""
idcn: Chinese Resident Identity Number engine

Validates, parses and synthesizes 15- and 18-digit identity numbers, and
resolves their region codes across current and historical administrative
divisions.
"""

__version__ = "1.0.0"

from idcn.core.errors import (
    ErrorKind,
    IdCardError,
    InvalidBirthdayError,
    InvalidChecksumError,
    InvalidFormatError,
    InvalidLengthError,
    UnknownRegionError,
)
from idcn.core.info import IdentityInfo
from idcn.core.synthetic.id_card_generator import GenerationConstraints, IdCardGenerator
from idcn.core.validator import is_valid, upgrade_to_18, validate, validate_safe
from idcn.gazetteer.models import Area
from idcn.idcard import extract_info, fake_id, generate, resolve_area

__all__ = [
    "Area",
    "ErrorKind",
    "GenerationConstraints",
    "IdCardError",
    "IdCardGenerator",
    "IdentityInfo",
    "InvalidBirthdayError",
    "InvalidChecksumError",
    "InvalidFormatError",
    "InvalidLengthError",
    "UnknownRegionError",
    "extract_info",
    "fake_id",
    "generate",
    "is_valid",
    "resolve_area",
    "upgrade_to_18",
    "validate",
    "validate_safe",
]
