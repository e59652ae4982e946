"""
Date helpers shared by every collection.

Front matter dates arrive in several shapes: YAML turns `2023-05-01` into a
date, `2023-05-01T10:00:00Z` into a datetime and `2023` into an int, while
quoted values stay strings (possibly partial, e.g. "2023-05", or free-form,
e.g. "May 2023"). Everything is reduced to a calendar date for sorting and
year extraction, and to ISO text for output.
"""
from datetime import date, datetime
from typing import Any

from dateutil import parser as date_parser

# Fills the fields a free-form date leaves out, so parsing never depends on today.
_PARSE_DEFAULT = datetime(1900, 1, 1)


def parse_date(value: Any) -> date | None:
    """Return the calendar date for a front matter value, or None if it has none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, int):
        # bare year
        return date(value, 1, 1) if 1 <= value <= 9999 else None

    text = str(value).strip()
    if not text:
        return None

    try:
        return date_parser.isoparse(text).date()
    except (ValueError, OverflowError, TypeError):
        pass

    try:
        return date_parser.parse(text, default=_PARSE_DEFAULT).date()
    except (ValueError, OverflowError, TypeError):
        return None


def date_text(value: Any) -> str:
    """Render a front matter date as output text: ISO for date objects, as-is otherwise."""
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value).strip()


def newest_first(records: list[dict], date_field: str) -> list[dict]:
    """
    Sort records by `date_field`, newest first.
    Missing or unparseable dates count as the oldest possible date, so every
    dated record comes before every undated one. Ties keep `id` order.
    """
    by_id = sorted(records, key=lambda r: r["id"])
    return sorted(
        by_id,
        key=lambda r: parse_date(r.get(date_field)) or date.min,
        reverse=True,
    )
