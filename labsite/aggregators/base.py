"""
SourceDocument dataclass and BaseAggregator ABC.
Every aggregator turns one content folder into one output record via its
`fields` table, then orders the finished collection in sort().
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

from labsite.aggregators.fields import Field
from labsite.content.assets import list_entries, match_sidecar, public_path, read_sidecar
from labsite.content.frontmatter import load_document


@dataclass
class SourceDocument:
    folder:     str             # folder name, becomes the record id
    path:       Path            # absolute folder path
    url_prefix: str             # '/news', '/research', …
    metadata:   dict[str, Any] = field(default_factory=dict)
    body:       str = ""
    entries:    list[str] = field(default_factory=list)   # sidecar candidates
    today:      date = field(default_factory=date.today)  # run date

    def find_asset(self, candidates: tuple[str, ...]) -> str | None:
        """Filename of the first matching sidecar, or None."""
        return match_sidecar(self.entries, candidates)

    def asset_url(self, candidates: tuple[str, ...]) -> str | None:
        filename = self.find_asset(candidates)
        if filename is None:
            return None
        return public_path(self.url_prefix, self.folder, filename)

    def read_asset(self, candidates: tuple[str, ...]) -> str | None:
        filename = self.find_asset(candidates)
        if filename is None:
            return None
        return read_sidecar(self.path, filename)


class BaseAggregator(ABC):
    collection: str = ""                # registry key and log tag
    index_name: str = "index.md"        # metadata document expected in each folder
    fields:     tuple[Field, ...] = ()  # output fields, in output key order

    def __init__(self, url_prefix: str | None = None, today: date | None = None):
        self.url_prefix = (url_prefix or f"/{self.collection}").rstrip("/")
        self.today = today or date.today()

    def read(self, folder: Path) -> SourceDocument:
        """Parse the folder's metadata document and list its sidecar files."""
        metadata, body = load_document(folder / self.index_name)
        return SourceDocument(
            folder     = folder.name,
            path       = folder,
            url_prefix = self.url_prefix,
            metadata   = metadata,
            body       = body,
            entries    = list_entries(folder),
            today      = self.today,
        )

    def build_record(self, doc: SourceDocument) -> dict[str, Any]:
        record: dict[str, Any] = {"id": doc.folder}
        for f in self.fields:
            record[f.name] = f.resolve(doc, record)
        return self.postprocess(record, doc)

    def postprocess(self, record: dict[str, Any], doc: SourceDocument) -> dict[str, Any]:
        """Entity-specific rewrites after the field table ran. Default: none."""
        return record

    @abstractmethod
    def sort(self, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Return the collection in the order consumers must assume."""
        ...
