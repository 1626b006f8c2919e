"""Localized weekday and month names."""

from .lookup import (
    get_default_locale,
    get_month_names,
    get_weekday_names,
    set_default_locale,
)

__all__ = [
    "get_default_locale",
    "get_month_names",
    "get_weekday_names",
    "set_default_locale",
]
