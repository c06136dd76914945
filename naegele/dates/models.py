"""
Value types for calendar dates and gestational age.

Instances are immutable and carry no identity; they are created by the
parsers and the obstetric computations and discarded after use.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalendarDate:
    """Validated day/month/year triple."""
    day: int        # 1 to days_in_month(month, year)
    month: int      # 1 to 12
    year: int       # Within the configured year range

    def format(self) -> str:
        """Render as dd/mm/yyyy."""
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class GestationalAge:
    """Elapsed time since LNMP in completed weeks and remaining days."""
    weeks: int      # Non-negative
    days: int       # 0 to 6

    @classmethod
    def from_days(cls, total_days: int) -> "GestationalAge":
        return cls(weeks=total_days // 7, days=total_days % 7)

    @property
    def total_days(self) -> int:
        return self.weeks * 7 + self.days

    def format(self) -> str:
        """
        Render as "<w> week(s), <d> day(s)", or "<w> week(s)" when days is 0.

        Unit names are singular only for exactly 1.
        """
        weeks_text = f"{self.weeks} {'week' if self.weeks == 1 else 'weeks'}"
        if self.days > 0:
            return f"{weeks_text}, {self.days} {'day' if self.days == 1 else 'days'}"
        return weeks_text

    def __str__(self) -> str:
        return self.format()
