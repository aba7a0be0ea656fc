import logging
import re

from pydantic import ValidationError

from clock_adder.models.schemas import ClockTime

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2}) (AM|PM)", re.ASCII)
_TIME_RE_ANY_CASE = re.compile(r"(\d{1,2}):(\d{2}) (AM|PM)", re.ASCII | re.IGNORECASE)


class InvalidTimeFormat(ValueError):
    """Raised when a time string does not match '[H]H:MM AM|PM'."""

    def __init__(self, value, reason: str = "") -> None:
        self.value = value
        message = f"Time must be in [H]H:MM AM|PM format, got {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def parse_clock_time(text: str, case_sensitive: bool = True) -> ClockTime:
    """Parse '[H]H:MM AM|PM' into a ClockTime. E.g. '9:05 PM' -> 9, 5, 'PM'.

    With ``case_sensitive=False`` the meridiem may be written in any case
    ('am', 'Pm', ...); it is normalised to uppercase.
    """
    if not isinstance(text, str):
        raise InvalidTimeFormat(text, "expected a string")

    pattern = _TIME_RE if case_sensitive else _TIME_RE_ANY_CASE
    match = pattern.fullmatch(text)
    if match is None:
        logger.debug("Rejected time string %r", text)
        raise InvalidTimeFormat(text)

    hour, minute, meridiem = match.groups()
    try:
        return ClockTime(hour=int(hour), minute=int(minute), meridiem=meridiem.upper())
    except ValidationError as exc:
        logger.debug("Time string %r out of range", text)
        reasons = "; ".join(err["msg"] for err in exc.errors())
        raise InvalidTimeFormat(text, reasons) from exc

