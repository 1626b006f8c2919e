from .date import (
    COMPACT_FMT,
    DATE_FMT,
    DateLike,
    from_python_date,
    to_date,
    to_python_date,
)

__all__ = [
    "COMPACT_FMT",
    "DATE_FMT",
    "DateLike",
    "from_python_date",
    "to_date",
    "to_python_date",
]
