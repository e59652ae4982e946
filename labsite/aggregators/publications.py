"""
Publications aggregator — public/publications/<folder>/index.md → publications-generated.json.

Authors are stored as account identifiers (`admin`, `jane_doe`) and rewritten to
display names; a `cite.bib` next to the document is embedded verbatim.
"""
from typing import Any

from config.settings import AUTHOR_ALIASES
from labsite.aggregators.base import BaseAggregator, SourceDocument
from labsite.aggregators.fields import (
    Field,
    as_list,
    body,
    list_default,
    meta,
    meta_date,
    meta_list,
    none_default,
    run_year,
    sidecar_text,
    sidecar_url,
    year_of,
)
from labsite.content.assets import CITATION_FILES, FEATURED_IMAGES
from labsite.content.dates import newest_first


def author_display_name(author: Any, aliases: dict[str, str] = AUTHOR_ALIASES) -> str:
    """'admin' → the configured PI name; 'jane_doe' → 'jane doe'."""
    ident = str(author).strip()
    if ident in aliases:
        return aliases[ident]
    return ident.replace("_", " ")


def format_authors(authors: Any, aliases: dict[str, str] = AUTHOR_ALIASES) -> str:
    names = [author_display_name(a, aliases) for a in as_list(authors) if a is not None]
    return ", ".join(n for n in names if n)


def _paper_pdf(doc: SourceDocument, record: dict[str, Any]) -> str | None:
    return doc.asset_url((f"{doc.folder}.pdf",))


class PublicationsAggregator(BaseAggregator):
    collection = "publications"

    fields = (
        Field("title",            (meta("title"),)),
        Field("authors",          (lambda doc, record: format_authors(doc.metadata.get("authors")),)),
        Field("venue",            (meta("publication"), meta("venue"))),
        Field("year",             (year_of(meta("date")),), default=run_year),
        Field("date",             (meta_date("date"),)),
        Field("publicationTypes", (meta_list("publication_types"),), default=list_default),
        Field("abstract",         (body(), meta("abstract"))),
        Field("pdf",              (meta("url_pdf"), _paper_pdf)),
        Field("poster",           (meta("url_poster"),)),
        Field("slides",           (meta("url_slides"),)),
        Field("code",             (meta("url_code"),)),
        Field("citation",         (sidecar_text(CITATION_FILES),), default=none_default),
        Field("featuredImage",    (meta("image"), sidecar_url(FEATURED_IMAGES)), default=none_default),
        Field("folder",           (lambda doc, record: doc.folder,)),
    )

    def sort(self, records):
        return newest_first(records, "date")
