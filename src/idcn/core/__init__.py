"""Core identity number engine: parsing, validation, resolution, extraction."""

from idcn.core.address import AddressResolver, RegionTier, classify_tier
from idcn.core.checksum import calculate_check_code
from idcn.core.errors import (
    ErrorKind,
    IdCardError,
    InvalidBirthdayError,
    InvalidChecksumError,
    InvalidFormatError,
    InvalidLengthError,
    UnknownRegionError,
)
from idcn.core.info import IdCardInfoExtractor, IdentityInfo
from idcn.core.parser import ParsedRecord, parse_id_card
from idcn.core.validator import is_valid, upgrade_to_18, validate, validate_safe

__all__ = [
    "AddressResolver",
    "ErrorKind",
    "IdCardError",
    "IdCardInfoExtractor",
    "IdentityInfo",
    "InvalidBirthdayError",
    "InvalidChecksumError",
    "InvalidFormatError",
    "InvalidLengthError",
    "ParsedRecord",
    "RegionTier",
    "UnknownRegionError",
    "calculate_check_code",
    "classify_tier",
    "is_valid",
    "parse_id_card",
    "upgrade_to_18",
    "validate",
    "validate_safe",
]
