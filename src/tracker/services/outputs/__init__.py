"""View formatting helpers."""

from .formatter import (
    customer_card,
    customer_count_label,
    format_visit_date,
    stats_model,
    visit_count_label,
    visit_history,
)

__all__ = [
    "customer_card",
    "customer_count_label",
    "format_visit_date",
    "stats_model",
    "visit_count_label",
    "visit_history",
]
