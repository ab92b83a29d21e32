"""
Identity number validation.

Parse -> birthday check -> checksum (18-digit only), stopping at the first
failure. Region data plays no part in the verdict: a number whose region
code is unknown to every gazetteer epoch is still valid.
"""

from datetime import date
from typing import Optional

from idcn.core.birthday import is_valid_birthday
from idcn.core.checksum import calculate_check_code
from idcn.core.errors import (
    ErrorKind,
    IdCardError,
    InvalidBirthdayError,
    InvalidChecksumError,
    InvalidLengthError,
)
from idcn.core.parser import ParsedRecord, parse_id_card
from idcn.logging.setup import get_logger
from idcn.utils.text import mask_id_card

logger = get_logger(__name__)


def check_id_card(raw: str, today: Optional[date] = None) -> ParsedRecord:
    """Validate an identity number and return its parsed fields.

    Args:
        raw: 15- or 18-digit identity number.
        today: Reference date for the birthday check, defaults to today.

    Returns:
        The parsed record of a valid number.

    Raises:
        InvalidLengthError: Length is neither 15 nor 18.
        InvalidFormatError: Non-digit where digits are required.
        InvalidBirthdayError: Birth date is not a real date, before 1800,
            or in the future.
        InvalidChecksumError: 18-digit number whose check character does
            not match its body.
    """
    record = parse_id_card(raw)

    if not is_valid_birthday(record.birth_code, today=today):
        raise InvalidBirthdayError()

    if record.source_length == 18 and calculate_check_code(record.body) != record.check_char:
        raise InvalidChecksumError()

    return record


def validate(raw: str, today: Optional[date] = None) -> None:
    """Validate an identity number, raising IdCardError on failure."""
    check_id_card(raw, today=today)


def validate_safe(raw: str, today: Optional[date] = None) -> tuple[bool, Optional[ErrorKind]]:
    """Validate without raising.

    Returns:
        Tuple of (is_valid, error_kind). error_kind is None when valid.

    Example:
        >>> validate_safe("12345")
        (False, <ErrorKind.INVALID_LENGTH: 'invalid_length'>)
    """
    try:
        check_id_card(raw, today=today)
    except IdCardError as e:
        logger.debug(
            "Identity number rejected",
            extra={"event": "id_card_invalid", "id_card": mask_id_card(raw), "kind": e.kind.value},
        )
        return False, e.kind
    return True, None


def is_valid(raw: str, today: Optional[date] = None) -> bool:
    """Check whether an identity number is valid.

    Examples:
        >>> is_valid("110101199003077758")
        True
        >>> is_valid("110101199003077750")
        False
    """
    return validate_safe(raw, today=today)[0]


def upgrade_to_18(raw: str, today: Optional[date] = None) -> str:
    """Convert a 15-digit identity number to the 18-digit form.

    18-character input is returned unchanged without further checks.

    Raises:
        InvalidLengthError: Length is neither 15 nor 18.
        InvalidFormatError: The 15-digit number contains non-digits.
        InvalidBirthdayError: The 15-digit number has an invalid birth date.

    Example:
        >>> upgrade_to_18("110101900307775")
        '110101199003077758'
    """
    if len(raw) == 18:
        return raw
    if len(raw) != 15:
        raise InvalidLengthError()

    record = check_id_card(raw, today=today)
    body = record.body
    return body + calculate_check_code(body)
