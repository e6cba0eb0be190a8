"""Display-ready views of customers and their visit history."""

from __future__ import annotations

from datetime import date

from ...models.domain import Customer
from ...schemas.customers import (
    CustomerCardModel,
    CustomerStatsModel,
    VisitHistoryEntryModel,
    VisitRecord,
)
from ..customers.stats import CustomerStats, compute_stats, is_today, sort_visits_descending


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def customer_count_label(count: int) -> str:
    return f"{count} {_plural(count, 'Customer', 'Customers')}"


def visit_count_label(count: int) -> str:
    return f"{count} {_plural(count, 'visit', 'visits')}"


def format_visit_date(day: date) -> str:
    """Format a day as e.g. ``Mon, Jan 15, 2024``."""
    return f"{day:%a}, {day:%b} {day.day}, {day.year}"


def stats_model(stats: CustomerStats) -> CustomerStatsModel:
    today_visit = None
    if stats.today_visit is not None:
        today_visit = VisitRecord(date=stats.today_visit.date, count=stats.today_visit.count)
    return CustomerStatsModel(
        totalVisits=stats.total_visits,
        totalDays=stats.total_days,
        todayVisit=today_visit,
    )


def customer_card(customer: Customer, today: date) -> CustomerCardModel:
    stats = compute_stats(customer, today)
    today_count = stats.today_visit.count if stats.today_visit else None
    today_label = None
    if today_count is not None:
        today_label = f"Visited today: {today_count} {_plural(today_count, 'time', 'times')}"
    return CustomerCardModel(
        id=customer.id,
        name=customer.name,
        location=customer.location,
        totalVisits=stats.total_visits,
        totalDays=stats.total_days,
        todayCount=today_count,
        todayLabel=today_label,
    )


def visit_history(customer: Customer, today: date) -> list[VisitHistoryEntryModel]:
    return [
        VisitHistoryEntryModel(
            date=visit.date,
            label=format_visit_date(visit.date),
            count=visit.count,
            countLabel=visit_count_label(visit.count),
            isToday=is_today(visit.date, today),
        )
        for visit in sort_visits_descending(customer.visits)
    ]
