from pydantic import BaseModel, ConfigDict, field_validator

MINUTES_PER_DAY = 1440
MINUTES_PER_HALF_DAY = 720


class ClockTime(BaseModel):
    """A time of day on a 12-hour clock."""

    model_config = ConfigDict(frozen=True)

    hour: int
    minute: int
    meridiem: str

    @field_validator("hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Reject hours outside the 12-hour clock range [1, 12]."""
        if not 1 <= v <= 12:
            raise ValueError(f"hour must be between 1 and 12, got {v}")
        return v

    @field_validator("minute")
    @classmethod
    def validate_minute(cls, v: int) -> int:
        """Reject minutes outside the range [0, 59]."""
        if not 0 <= v <= 59:
            raise ValueError(f"minute must be between 0 and 59, got {v}")
        return v

    @field_validator("meridiem")
    @classmethod
    def validate_meridiem(cls, v: str) -> str:
        if v not in ("AM", "PM"):
            raise ValueError(f"meridiem must be 'AM' or 'PM', got '{v}'")
        return v

    def to_minutes(self) -> int:
        """Minutes since midnight, in [0, 1440). 12 AM is 0, 12 PM is 720."""
        base = MINUTES_PER_HALF_DAY if self.meridiem == "PM" else 0
        return base + (self.hour % 12) * 60 + self.minute

    @classmethod
    def from_minutes(cls, minutes: int) -> "ClockTime":
        """Build the ClockTime for *minutes* since midnight, wrapping at 24 h."""
        minutes = minutes % MINUTES_PER_DAY
        meridiem = "PM" if minutes >= MINUTES_PER_HALF_DAY else "AM"
        hour = (minutes // 60) % 12 or 12
        return cls(hour=hour, minute=minutes % 60, meridiem=meridiem)

    def plus_minutes(self, minutes: int) -> "ClockTime":
        return ClockTime.from_minutes(self.to_minutes() + minutes)

    def render(self) -> str:
        """Format as '[H]H:MM AM|PM'. E.g. hour=9, minute=5, PM -> '9:05 PM'."""
        return f"{self.hour}:{self.minute:02d} {self.meridiem}"
