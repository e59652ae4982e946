"""
Sidecar assets — files dropped next to an item's Markdown document and found
by naming convention (featured.jpg, avatar.png, cite.bib, <folder>.pdf…).

Matching is case-insensitive against an ordered candidate list; the first
candidate present wins and the file keeps its on-disk spelling in the public
path. Any filesystem error counts as "no asset".
"""
from pathlib import Path

from loguru import logger

FEATURED_IMAGES = ("featured.jpg", "featured.jpeg", "featured.png")
AVATAR_IMAGES = ("avatar.jpg", "avatar.jpeg", "avatar.png")
CITATION_FILES = ("cite.bib",)


def list_entries(folder: Path) -> list[str]:
    """Names of the regular files directly inside `folder`, sorted."""
    try:
        return sorted(p.name for p in folder.iterdir() if p.is_file())
    except OSError as exc:
        logger.warning(f"[Assets] could not list {folder}: {exc}")
        return []


def match_sidecar(entries: list[str], candidates: tuple[str, ...]) -> str | None:
    """Return the first entry matching a candidate name (case-insensitive)."""
    by_lower: dict[str, str] = {}
    for name in entries:
        by_lower.setdefault(name.lower(), name)
    for candidate in candidates:
        found = by_lower.get(candidate.lower())
        if found:
            return found
    return None


def public_path(url_prefix: str, folder: str, filename: str) -> str:
    return f"{url_prefix.rstrip('/')}/{folder}/{filename}"


def read_sidecar(folder: Path, filename: str) -> str | None:
    """Read a text sidecar verbatim, or None if it cannot be read."""
    try:
        return (folder / filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"[Assets] could not read {folder / filename}: {exc}")
        return None
