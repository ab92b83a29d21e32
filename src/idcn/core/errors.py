"""Error taxonomy for identity number processing.

Every user-facing failure is an ``IdCardError`` carrying an ``ErrorKind``.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of identity number failures."""

    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    INVALID_BIRTHDAY = "invalid_birthday"
    INVALID_CHECKSUM = "invalid_checksum"
    UNKNOWN_REGION = "unknown_region"


class IdCardError(ValueError):
    """Base class for identity number failures."""

    kind: ErrorKind
    default_message = "身份证号不合法"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class InvalidLengthError(IdCardError):
    kind = ErrorKind.INVALID_LENGTH
    default_message = "身份证号长度必须是15或18位"


class InvalidFormatError(IdCardError):
    kind = ErrorKind.INVALID_FORMAT
    default_message = "身份证号格式不正确"


class InvalidBirthdayError(IdCardError):
    kind = ErrorKind.INVALID_BIRTHDAY
    default_message = "出生日期不合法"


class InvalidChecksumError(IdCardError):
    kind = ErrorKind.INVALID_CHECKSUM
    default_message = "校验码不正确"


class UnknownRegionError(IdCardError):
    """Raised when a region code resolves at no tier of any data epoch."""

    kind = ErrorKind.UNKNOWN_REGION

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"地址码 {code:06d} 无法识别")
