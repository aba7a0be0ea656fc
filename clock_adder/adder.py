import logging
import operator

from clock_adder.utils.time_utils import parse_clock_time

logger = logging.getLogger(__name__)


class TimeAdder:
    """Adds minutes to times written as '[H]H:MM AM|PM'.

    Holds no mutable state, so one instance can be shared between threads.
    """

    def __init__(self, case_sensitive: bool = True) -> None:
        self._case_sensitive = case_sensitive

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def add_minutes(self, time: str, minutes: int) -> str:
        """Return the time *minutes* after *time*, wrapping around midnight.

        Args:
            time:     Start time, '[H]H:MM AM|PM'.
            minutes:  Minutes to add; negative values move backwards and
                      any magnitude is accepted.

        Returns:
            The resulting time in canonical '[H]H:MM AM|PM' form.

        Raises:
            InvalidTimeFormat: *time* does not match the expected format.
            TypeError:         *minutes* is not an integer.
        """
        if isinstance(minutes, bool):
            raise TypeError("minutes must be an int, got bool")
        minutes = operator.index(minutes)

        start = parse_clock_time(time, case_sensitive=self._case_sensitive)
        result = start.plus_minutes(minutes).render()
        logger.debug("%s %+d min -> %s", time, minutes, result)
        return result


time_adder = TimeAdder()


def add_minutes(time: str, minutes: int) -> str:
    """Add *minutes* to a '[H]H:MM AM|PM' string using the shared TimeAdder."""
    return time_adder.add_minutes(time, minutes)
