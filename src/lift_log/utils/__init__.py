"""Utility helpers."""

from .dates import (
    end_of_day,
    format_date_only,
    format_datetime,
    format_time_only,
    parse_timestamp,
    start_of_day,
    subtract_month,
)

__all__ = [
    "end_of_day",
    "format_date_only",
    "format_datetime",
    "format_time_only",
    "parse_timestamp",
    "start_of_day",
    "subtract_month",
]
