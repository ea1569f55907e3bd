"""Error taxonomy raised by the calendar engine.

Every error is a ``ValueError`` so callers that only care about bad input can
catch that; callers that branch on the kind of failure use ``code``.
"""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    INVALID_DATE = "INVALID_DATE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_LUNAR_DATE = "INVALID_LUNAR_DATE"
    INVALID_LOCATION = "INVALID_LOCATION"


class LunarCalendarError(ValueError):
    """Base error carrying an ErrorCode and the offending inputs."""

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode, details: Any = None):
        super().__init__(message)
        self.code = code
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, code={self.code!s})"


class InvalidDateError(LunarCalendarError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, ErrorCode.INVALID_DATE, details)


class OutOfRangeError(LunarCalendarError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, ErrorCode.OUT_OF_RANGE, details)


class InvalidLunarDateError(LunarCalendarError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, ErrorCode.INVALID_LUNAR_DATE, details)


class InvalidLocationError(LunarCalendarError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(message, ErrorCode.INVALID_LOCATION, details)
