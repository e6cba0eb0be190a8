import copy
from datetime import date, datetime, timezone

import pytest

from src.tracker.models.domain import Customer, Visit
from src.tracker.services.customers import compute_stats, is_today, sort_visits_descending

TODAY = date(2024, 1, 16)


def _customer(visits: list[Visit]) -> Customer:
    return Customer(
        id="1",
        name="Acme Store",
        location="5th Ave",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        visits=visits,
    )


HISTORIES = [
    [],
    [Visit(date(2024, 1, 16), 1)],
    [Visit(date(2024, 1, 15), 2), Visit(date(2024, 1, 16), 1)],
    [Visit(date(2023, 12, 1), 5), Visit(date(2024, 2, 1), 1), Visit(date(2023, 11, 30), 4)],
]


def test_empty_history_has_zero_totals() -> None:
    stats = compute_stats(_customer([]), TODAY)

    assert stats.total_visits == 0
    assert stats.total_days == 0
    assert stats.today_visit is None


@pytest.mark.parametrize("visits", HISTORIES)
def test_totals_match_history(visits: list[Visit]) -> None:
    stats = compute_stats(_customer(visits), TODAY)

    assert stats.total_visits == sum(v.count for v in visits)
    assert stats.total_days == len(visits)


def test_today_visit_is_the_entry_for_today() -> None:
    visits = [Visit(date(2024, 1, 15), 2), Visit(date(2024, 1, 16), 3)]

    stats = compute_stats(_customer(visits), TODAY)

    assert stats.today_visit == Visit(date(2024, 1, 16), 3)
    assert compute_stats(_customer(visits), date(2024, 1, 17)).today_visit is None


@pytest.mark.parametrize("visits", HISTORIES)
def test_compute_stats_is_pure(visits: list[Visit]) -> None:
    customer = _customer(visits)
    snapshot = copy.deepcopy(customer.visits)

    first = compute_stats(customer, TODAY)
    second = compute_stats(customer, TODAY)

    assert first == second
    assert customer.visits == snapshot


def test_compute_stats_defaults_to_current_date(monkeypatch: pytest.MonkeyPatch) -> None:
    from src.tracker.models import domain

    monkeypatch.setattr(domain, "current_date", lambda: date(2024, 1, 15))
    customer = _customer([Visit(date(2024, 1, 15), 4)])

    assert compute_stats(customer).today_visit == Visit(date(2024, 1, 15), 4)


@pytest.mark.parametrize("visits", HISTORIES)
def test_sort_visits_descending(visits: list[Visit]) -> None:
    snapshot = list(visits)

    ordered = sort_visits_descending(visits)

    assert [v.date for v in ordered] == sorted((v.date for v in visits), reverse=True)
    assert sorted(ordered, key=lambda v: v.date) == sorted(visits, key=lambda v: v.date)
    assert visits == snapshot
    assert ordered is not visits


def test_is_today() -> None:
    assert is_today(date(2024, 1, 16), TODAY)
    assert not is_today(date(2024, 1, 15), TODAY)


def test_compute_stats_accepts_iso_string_today() -> None:
    customer = _customer([Visit(date(2024, 1, 15), 2), Visit(date(2024, 1, 16), 1)])

    stats = compute_stats(customer, "2024-01-15")

    assert stats.today_visit == Visit(date(2024, 1, 15), 2)
    assert stats == compute_stats(customer, date(2024, 1, 15))
    assert is_today(date(2024, 1, 15), "2024-01-15")
