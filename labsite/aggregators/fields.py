"""
Field fallback chains.

An output field is declared once as Field(name, candidates, default). The
candidates are extractors `(doc, record) -> value`, tried in order; the first
non-empty value wins, otherwise the default is built from the document.
`record` holds the fields resolved so far, so later fields can derive from
earlier ones (duration from startDate/endDate, etc).

    Field("agency", (meta_item("agencies"), meta("agency")))
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from labsite.content.dates import date_text, parse_date

if TYPE_CHECKING:
    from labsite.aggregators.base import SourceDocument

Extractor = Callable[["SourceDocument", dict[str, Any]], Any]
Default = Callable[["SourceDocument"], Any]


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return not value
    return False


def text_default(doc: SourceDocument) -> str:
    return ""


def list_default(doc: SourceDocument) -> list:
    return []


def none_default(doc: SourceDocument) -> None:
    return None


def run_year(doc: SourceDocument) -> int:
    return doc.today.year


@dataclass(frozen=True)
class Field:
    name:       str
    candidates: tuple[Extractor, ...]
    default:    Default = text_default

    def resolve(self, doc: SourceDocument, record: dict[str, Any]) -> Any:
        for candidate in self.candidates:
            value = candidate(doc, record)
            if not is_empty(value):
                return value
        return self.default(doc)


# ── Extractors ─────────────────────────────────────────────────────────────────

def as_list(value: Any) -> list:
    """Front matter lists are sometimes written as a single scalar."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def meta(key: str) -> Extractor:
    return lambda doc, record: doc.metadata.get(key)


def meta_list(key: str) -> Extractor:
    return lambda doc, record: as_list(doc.metadata.get(key))


def meta_item(key: str, index: int = 0) -> Extractor:
    def extract(doc: SourceDocument, record: dict[str, Any]) -> Any:
        items = as_list(doc.metadata.get(key))
        return items[index] if len(items) > index else None
    return extract


def meta_date(key: str) -> Extractor:
    return lambda doc, record: date_text(doc.metadata.get(key))


def body() -> Extractor:
    return lambda doc, record: doc.body


def resolved(name: str) -> Extractor:
    return lambda doc, record: record.get(name)


def sidecar_url(candidates: tuple[str, ...]) -> Extractor:
    return lambda doc, record: doc.asset_url(candidates)


def sidecar_text(candidates: tuple[str, ...]) -> Extractor:
    return lambda doc, record: doc.read_asset(candidates)


def year_of(*chain: Extractor) -> Extractor:
    """Calendar year of the first non-empty date in `chain`; None if it doesn't parse."""
    def extract(doc: SourceDocument, record: dict[str, Any]) -> int | None:
        for candidate in chain:
            value = candidate(doc, record)
            if not is_empty(value):
                parsed = parse_date(value)
                return parsed.year if parsed else None
        return None
    return extract
