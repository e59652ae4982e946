"""
Team aggregator — public/team/<lastname_firstname>/_index.md → team-generated.json.

Three pieces of normalization live here:
  - display name fallback from the folder convention (doe_jane → "jane doe")
  - education, parsed at the boundary into one of two explicit shapes:
      CourseList  — {courses: [{course, institution, year}, …]}  (Hugo Academic style)
      RecordList  — [{degree, institution, year, …}, …]           (already final)
  - social links, classified into named fields by icon or URL host

Ordered by role priority, then name.
"""
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from config.settings import DEFAULT_ORGANIZATION
from labsite.aggregators.base import BaseAggregator, SourceDocument
from labsite.aggregators.fields import (
    Field,
    body,
    list_default,
    meta,
    meta_item,
    meta_list,
    sidecar_url,
)
from labsite.content.assets import AVATAR_IMAGES

# ── Role ordering ──────────────────────────────────────────────────────────────
# Lower number = listed first. Unknown roles share the fallback rank.

ROLE_PRIORITY: dict[str, int] = {
    "Faculty":                1,
    "PhD Students":           2,
    "MS Students":            3,
    "Masters Students":       3,
    "Undergraduate Students": 4,
    "Alumni":                 5,
}
_DEFAULT_ROLE_PRIORITY = 99


def display_name_from_folder(folder: str) -> str:
    """'doe_jane' → 'jane doe'; 'doe_mary_ann' → 'mary ann doe'; 'plato' → 'plato'."""
    parts = [p for p in folder.split("_") if p]
    if len(parts) > 1:
        return f"{' '.join(parts[1:])} {parts[0]}"
    return folder.replace("_", " ")


# ── Education ──────────────────────────────────────────────────────────────────

_STATUS_PREFIX_RE = re.compile(r"^(Current|Expected)\s+", re.IGNORECASE)


@dataclass(frozen=True)
class Course:
    degree:      str
    institution: str
    year:        str
    current:     bool

    @classmethod
    def from_entry(cls, entry: dict) -> "Course":
        name = "" if entry.get("course") is None else str(entry["course"])
        year = "" if entry.get("year") is None else str(entry["year"])
        current = (
            "current" in name.lower()
            or "expected" in name.lower()
            or "expected" in year.lower()
        )
        return cls(
            degree      = _STATUS_PREFIX_RE.sub("", name),
            institution = "" if entry.get("institution") is None else str(entry["institution"]),
            year        = _STATUS_PREFIX_RE.sub("", year),
            current     = current,
        )

    def as_record(self) -> dict[str, str]:
        record = {
            "degree":      self.degree,
            "institution": self.institution,
            "year":        self.year,
        }
        if self.current:
            record["status"] = "current"
        return record


@dataclass(frozen=True)
class CourseList:
    courses: tuple[Course, ...]

    def records(self) -> list[dict]:
        return [c.as_record() for c in self.courses]


@dataclass(frozen=True)
class RecordList:
    entries: tuple[dict, ...]

    def records(self) -> list[dict]:
        return [dict(e) for e in self.entries]


def parse_education(raw: Any) -> CourseList | RecordList | None:
    """
    Validate the `education` front matter value into one of its two shapes.
    Returns None when absent; raises ValueError for anything else.
    """
    if raw is None or raw == [] or raw == {}:
        return None

    if isinstance(raw, dict) and "courses" in raw:
        courses = raw["courses"] or []
        if not isinstance(courses, list) or not all(isinstance(c, dict) for c in courses):
            raise ValueError("education.courses must be a list of mappings")
        return CourseList(tuple(Course.from_entry(c) for c in courses))

    if isinstance(raw, list):
        if not all(isinstance(e, dict) for e in raw):
            raise ValueError("education list entries must be mappings")
        return RecordList(tuple(raw))

    raise ValueError(f"unrecognised education shape: {type(raw).__name__}")


def _education(doc: SourceDocument, record: dict[str, Any]) -> list[dict]:
    parsed = parse_education(doc.metadata.get("education"))
    return parsed.records() if parsed else []


# ── Social links ───────────────────────────────────────────────────────────────

def _host_in(*domains: str):
    def match(url) -> bool:
        host = (url.hostname or "").lower()
        return any(host == d or host.endswith("." + d) for d in domains)
    return match


_MAILTO_RE = re.compile(r"^mailto:", re.IGNORECASE)

# Checked in order per entry; first match wins.
_SOCIAL_RULES = [
    ("email",    {"envelope"},                  lambda url: url.scheme == "mailto"),
    ("linkedin", {"linkedin"},                  _host_in("linkedin.com")),
    ("github",   {"github"},                    _host_in("github.com")),
    ("scholar",  {"google-scholar", "scholar"}, _host_in("scholar.google.com")),
    ("twitter",  {"twitter"},                   _host_in("twitter.com", "x.com")),
    ("website",  {"globe", "link"},             lambda url: False),
]


def classify_social(link: str, icon: str = "") -> str | None:
    """Return the named field a social entry belongs to, or None."""
    icon = (icon or "").strip().lower()
    try:
        url = urlparse(link.strip())
    except ValueError:
        # unparseable link, icon alone decides
        url = None
    for name, icons, matches_url in _SOCIAL_RULES:
        if icon in icons or (url is not None and matches_url(url)):
            return name
    return None


def apply_social(record: dict[str, Any], social: Any) -> dict[str, Any]:
    """Fold a `social` list into the named link fields. Later entries win."""
    if not isinstance(social, list):
        return record
    for entry in social:
        if not isinstance(entry, dict) or not entry.get("link"):
            continue
        link = str(entry["link"])
        name = classify_social(link, str(entry.get("icon") or ""))
        if name is None:
            continue
        if name == "email":
            link = _MAILTO_RE.sub("", link.strip())
        record[name] = link
    return record


# ── Organization ───────────────────────────────────────────────────────────────

def _organization(doc: SourceDocument, record: dict[str, Any]) -> dict[str, str]:
    first = meta_item("organizations")(doc, record)
    first = first if isinstance(first, dict) else {}
    return {
        "name":       first.get("name") or DEFAULT_ORGANIZATION,
        "department": first.get("url") or "",
    }


# ── Aggregator ─────────────────────────────────────────────────────────────────

class TeamAggregator(BaseAggregator):
    collection = "team"
    index_name = "_index.md"

    fields = (
        Field("slug",         (lambda doc, record: doc.folder.lower().replace("_", "-"),)),
        Field("name",         (meta("name"), lambda doc, record: display_name_from_folder(doc.folder))),
        Field("role",         (meta_item("user_groups"), meta("role"))),
        Field("title",        (meta("role"), meta("title"))),
        Field("image",        (meta("image"), meta("avatar"), sidecar_url(AVATAR_IMAGES))),
        Field("bio",          (meta("bio"), meta("summary"))),
        Field("fullBio",      (body(), meta("bio"))),
        Field("email",        (meta("email"),)),
        Field("website",      (meta("website"), meta("external_link"))),
        Field("linkedin",     (meta("linkedin"),)),
        Field("github",       (meta("github"),)),
        Field("scholar",      (meta("scholar"), meta("google_scholar"))),
        Field("twitter",      (meta("twitter"),)),
        Field("interests",    (meta_list("interests"),), default=list_default),
        Field("education",    (_education,), default=list_default),
        Field("organization", (meta("organization"), _organization)),
        Field("folder",       (lambda doc, record: doc.folder,)),
    )

    def postprocess(self, record, doc):
        return apply_social(record, doc.metadata.get("social"))

    def sort(self, records):
        return sorted(
            records,
            key=lambda r: (
                ROLE_PRIORITY.get(str(r.get("role", "")), _DEFAULT_ROLE_PRIORITY),
                str(r.get("name", "")).casefold(),
                r["id"],
            ),
        )
