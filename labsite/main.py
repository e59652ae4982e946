"""
Entry point — builds the JSON data files the site front-end imports.

Each collection declared in config/collections.yaml is generated independently:
its content folder is scanned, normalized, sorted and written to DATA_DIR.
A missing content folder or a failed write marks that collection as failed and
the process exits with status 1 once every requested collection has run.

Usage:
    labsite-build            # every collection
    generate-news            # one collection (also generate-publications,
                             # generate-research, generate-team)
    python scripts/generate_news.py
"""
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml
from loguru import logger

from config.settings import COLLECTIONS_FILE, CONTENT_DIR, DATA_DIR, LOG_LEVEL, LOG_TO_FILE, LOGS_DIR
from labsite.aggregators.base import BaseAggregator
from labsite.aggregators.grants import GrantsAggregator
from labsite.aggregators.news import NewsAggregator
from labsite.aggregators.publications import PublicationsAggregator
from labsite.aggregators.team import TeamAggregator
from labsite.pipeline import RunReport, aggregate

# ── Aggregator registry ────────────────────────────────────────────────────────
_AGGREGATORS: dict[str, type[BaseAggregator]] = {
    "news":         NewsAggregator,
    "publications": PublicationsAggregator,
    "grants":       GrantsAggregator,
    "team":         TeamAggregator,
}


@dataclass
class CollectionConfig:
    name:        str
    content_dir: Path
    url_prefix:  str
    output:      Path


# ── Logging ────────────────────────────────────────────────────────────────────

def setup_logging(level: str = LOG_LEVEL, to_file: bool = LOG_TO_FILE) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
    if to_file:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOGS_DIR / "labsite_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="14 days",
            level=level,
            encoding="utf-8",
        )


# ── Collections ────────────────────────────────────────────────────────────────

def load_collections(
    path: Path = COLLECTIONS_FILE,
    content_dir: Path = CONTENT_DIR,
    data_dir: Path = DATA_DIR,
) -> dict[str, CollectionConfig]:
    """Parse collections.yaml and resolve each entry against the content/data roots."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    collections: dict[str, CollectionConfig] = {}
    for name, entry in (data.get("collections") or {}).items():
        if name not in _AGGREGATORS:
            logger.warning(f"[Build] no aggregator for collection '{name}', ignoring")
            continue
        collections[name] = CollectionConfig(
            name        = name,
            content_dir = Path(content_dir) / entry.get("content_dir", name),
            url_prefix  = entry.get("url_prefix", f"/{name}"),
            output      = Path(data_dir) / entry.get("output", f"{name}-generated.json"),
        )
    return collections


def run_collection(name: str, collections: dict[str, CollectionConfig] | None = None) -> RunReport:
    """Generate one collection. Raises KeyError for unknown names, OSError on fatal I/O."""
    collections = collections if collections is not None else load_collections()
    if name not in collections:
        raise KeyError(f"unknown collection '{name}' (known: {', '.join(sorted(collections))})")

    cfg = collections[name]
    aggregator = _AGGREGATORS[name](url_prefix=cfg.url_prefix)
    report = aggregate(aggregator, cfg.content_dir, cfg.output)
    logger.info(f"[{name}] {report.summary()}")
    return report


def build(names: list[str] | None = None) -> int:
    """Generate the requested collections (all by default). Returns the exit status."""
    collections = load_collections()
    failed = []
    for name in names or list(collections):
        try:
            run_collection(name, collections)
        except (OSError, KeyError) as exc:
            logger.error(f"[Build] {name} failed: {exc}")
            failed.append(name)
    if failed:
        logger.error(f"[Build] failed collections: {', '.join(failed)}")
        return 1
    return 0


# ── Console scripts ────────────────────────────────────────────────────────────

def _run(names: list[str] | None = None) -> None:
    setup_logging()
    raise SystemExit(build(names))


def main() -> None:
    _run()


def generate_news() -> None:
    _run(["news"])


def generate_publications() -> None:
    _run(["publications"])


def generate_research() -> None:
    _run(["grants"])


def generate_team() -> None:
    _run(["team"])


if __name__ == "__main__":
    main()
