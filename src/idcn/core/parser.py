"""Split a raw identity number into its fixed-width fields."""

from dataclasses import dataclass
from typing import Literal, Optional

from idcn.core.checksum import normalize_check_code
from idcn.core.errors import InvalidFormatError, InvalidLengthError


def _is_digits(text: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "１" or "²"
    return all("0" <= c <= "9" for c in text)


@dataclass(frozen=True)
class ParsedRecord:
    """Structured fields of an identity number.

    Attributes:
        region_code: 6-digit administrative region code.
        birth_code: 8-digit birth date (YYYYMMDD), century already inferred.
        order_code: 3-digit sequence code; its last digit encodes sex.
        check_char: Normalized check character, None for the 15-digit form.
        source_length: Length of the parsed input, 15 or 18.
    """

    region_code: str
    birth_code: str
    order_code: str
    check_char: Optional[str]
    source_length: Literal[15, 18]

    @property
    def body(self) -> str:
        """The 17-digit body that the check character is computed over."""
        return self.region_code + self.birth_code + self.order_code


def parse_id_card(raw: str) -> ParsedRecord:
    """Parse a raw identity number.

    Args:
        raw: 15- or 18-character identity number, no surrounding whitespace.

    Returns:
        The parsed record.

    Raises:
        InvalidLengthError: If the length is neither 15 nor 18.
        InvalidFormatError: If a digit position holds something else, or the
            18th character is not a digit or "X"/"x".
    """
    if len(raw) == 15:
        return _parse_15(raw)
    if len(raw) == 18:
        return _parse_18(raw)
    raise InvalidLengthError()


def _parse_15(raw: str) -> ParsedRecord:
    if not _is_digits(raw):
        raise InvalidFormatError()

    return ParsedRecord(
        region_code=raw[0:6],
        birth_code="19" + raw[6:12],  # 15位默认19xx年
        order_code=raw[12:15],
        check_char=None,
        source_length=15,
    )


def _parse_18(raw: str) -> ParsedRecord:
    if not _is_digits(raw[:17]):
        raise InvalidFormatError()

    last = raw[17]
    if not (_is_digits(last) or last in ("X", "x")):
        raise InvalidFormatError()

    return ParsedRecord(
        region_code=raw[0:6],
        birth_code=raw[6:14],
        order_code=raw[14:17],
        check_char=normalize_check_code(last),
        source_length=18,
    )
