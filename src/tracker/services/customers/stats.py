"""Visit statistics for a single customer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ...models.domain import Customer, Visit, coerce_date


@dataclass(frozen=True, slots=True)
class CustomerStats:
    total_visits: int
    total_days: int
    today_visit: Optional[Visit]


def compute_stats(customer: Customer, today: date | str | None = None) -> CustomerStats:
    """Summarise a customer's visit history as of ``today``.

    Reads ``customer.visits`` only; the same history and day always give
    the same result.
    """
    day = coerce_date(today)
    total_visits = sum(visit.count for visit in customer.visits)
    return CustomerStats(
        total_visits=total_visits,
        total_days=len(customer.visits),
        today_visit=customer.visit_on(day),
    )


def sort_visits_descending(visits: Iterable[Visit]) -> List[Visit]:
    """Return the visits most recent first, leaving the input untouched."""
    return sorted(visits, key=lambda visit: visit.date, reverse=True)


def is_today(day: date | str, today: date | str | None = None) -> bool:
    return coerce_date(day) == coerce_date(today)
