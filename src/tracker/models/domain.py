"""Domain models for tracked customers and their visit history."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import List, Union


def current_date() -> date:
    """Return today's calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def coerce_date(value: Union[date, str, None]) -> date:
    """Accept a date, datetime or ``YYYY-MM-DD`` string; ``None`` means today."""
    if value is None:
        return current_date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


@dataclass(slots=True)
class Visit:
    """Aggregated visits to a customer on a single calendar day."""

    date: date
    count: int = 1


@dataclass(slots=True)
class Customer:
    """A stop the driver keeps coming back to."""

    id: str
    name: str
    location: str
    created_at: datetime
    visits: List[Visit] = field(default_factory=list)

    def visit_on(self, day: date) -> Visit | None:
        for visit in self.visits:
            if visit.date == day:
                return visit
        return None


@dataclass(slots=True)
class UserProfile:
    """Signed-in driver profile."""

    id: str
    name: str
    email: str
    avatar: str
    provider: str


CustomerCollection = List[Customer]
