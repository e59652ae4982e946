"""
Research grants aggregator — public/research/<folder>/index.md → research-generated.json.

`agency` and `agencies` are kept in step: whichever one the author wrote, the
other is synthesized. Status is decided by the end date alone: a grant whose end
date has passed is "past", everything else (no end date included) is "current".
"""
from typing import Any

from labsite.aggregators.base import BaseAggregator, SourceDocument
from labsite.aggregators.fields import (
    Field,
    body,
    list_default,
    meta,
    meta_date,
    meta_item,
    meta_list,
    resolved,
    run_year,
    sidecar_url,
    year_of,
)
from labsite.content.assets import FEATURED_IMAGES
from labsite.content.dates import newest_first, parse_date


def duration_text(start: str, end: str) -> str:
    """'2022-01 - 2025-12', or just the start when there is no end."""
    return f"{start} - {end}" if end else start


def grant_status(end: Any, today) -> str:
    ended = parse_date(end)
    return "past" if ended is not None and ended < today else "current"


def _agencies_from_agency(doc: SourceDocument, record: dict[str, Any]) -> list:
    agency = record.get("agency")
    return [agency] if agency else []


def _duration(doc: SourceDocument, record: dict[str, Any]) -> str:
    return duration_text(record.get("startDate", ""), record.get("endDate", ""))


def _status(doc: SourceDocument, record: dict[str, Any]) -> str:
    return grant_status(record.get("endDate"), doc.today)


class GrantsAggregator(BaseAggregator):
    collection = "grants"

    fields = (
        Field("title",       (meta("title"),)),
        Field("agency",      (meta_item("agencies"), meta("agency"))),
        Field("agencies",    (meta_list("agencies"), _agencies_from_agency), default=list_default),
        Field("amount",      (meta("amount"),)),
        Field("startDate",   (meta_date("start_date"), meta_date("startDate"))),
        Field("endDate",     (meta_date("end_date"), meta_date("endDate"))),
        Field("duration",    (_duration,)),
        Field("year",        (year_of(resolved("startDate")),), default=run_year),
        Field("status",      (_status,)),
        Field("description", (body(), meta("description"))),
        Field("tags",        (meta_list("tags"),), default=list_default),
        Field("image",       (meta("image"), sidecar_url(FEATURED_IMAGES))),
        Field("folder",      (lambda doc, record: doc.folder,)),
    )

    def sort(self, records):
        return newest_first(records, "startDate")
