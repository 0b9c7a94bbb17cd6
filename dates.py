from dataclasses import dataclass


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int  # 1..12

    @classmethod
    def from_index(cls, total: int) -> "CalendarDate":
        """Build a date from an absolute month count (year*12 + month-1)."""
        year, m0 = divmod(total, 12)
        return cls(year, m0 + 1)

    def to_index(self) -> int:
        return self.year * 12 + (self.month - 1)

    def label(self) -> str:
        return f"{self.year}-{self.month:02d}"


def advance(anchor: CalendarDate, offset_months: int) -> CalendarDate:
    # divmod floors, so negative offsets borrow from the year correctly
    return CalendarDate.from_index(anchor.to_index() + offset_months)
