"""
Pipeline runner — aggregate(aggregator, root, output)

Scans `root` for one folder per item, builds a record per folder through the
aggregator, sorts the collection and writes it to `output`.

Per-folder problems (missing document, bad YAML, unexpected field shapes,
values JSON cannot encode) are logged and recorded in the RunReport; they
never stop the run. A missing root or a failed write propagates to the
caller.
"""
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from labsite.aggregators.base import BaseAggregator
from labsite.output.writer import dumps_collection, write_collection


@dataclass
class RunReport:
    collection: str
    output:     Path
    processed:  list[str] = field(default_factory=list)       # folder names written
    skipped:    list[str] = field(default_factory=list)       # no metadata document
    errored:    dict[str, str] = field(default_factory=dict)  # folder → error message

    @property
    def total(self) -> int:
        return len(self.processed)

    def summary(self) -> str:
        line = f"Generated {self.total} {self.collection} items to {self.output}"
        if self.skipped or self.errored:
            line += f" ({len(self.skipped)} skipped, {len(self.errored)} errored)"
        return line


def aggregate(aggregator: BaseAggregator, root: Path, output: Path) -> RunReport:
    """
    Run one full scan → normalize → sort → write pass.
    Returns the RunReport; the caller decides how to surface it.
    """
    tag = f"[{aggregator.collection}]"
    root = Path(root)
    output = Path(output)

    if not root.is_dir():
        raise FileNotFoundError(f"content directory not found: {root}")

    report = RunReport(collection=aggregator.collection, output=output)
    records: list[dict] = []

    for folder in sorted(p for p in root.iterdir() if p.is_dir()):
        name = folder.name

        if not (folder / aggregator.index_name).is_file():
            logger.warning(f"{tag} no {aggregator.index_name} found for {name}, skipping")
            report.skipped.append(name)
            continue

        try:
            doc = aggregator.read(folder)
            record = aggregator.build_record(doc)
            # values JSON cannot hold fail here, not at write time
            dumps_collection([record])
        except Exception as exc:
            logger.error(f"{tag} ✗ error processing {name}: {exc}")
            report.errored[name] = str(exc)
            continue

        records.append(record)
        report.processed.append(name)
        logger.info(f"{tag} ✓ processed {name}")

    write_collection(output, aggregator.sort(records))
    return report
