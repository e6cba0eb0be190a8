"""Customer service helpers."""

from .stats import CustomerStats, compute_stats, is_today, sort_visits_descending

__all__ = [
    "CustomerStats",
    "compute_stats",
    "is_today",
    "sort_visits_descending",
]
