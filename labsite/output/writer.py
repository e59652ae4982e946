"""
JSON output — writes one collection as a top-level array.

The file is written to a temporary sibling and moved into place with
os.replace, so readers see either the previous artifact or the complete new
one. Any failure removes the temporary file and propagates.
"""
import json
import os
import stat
import tempfile
from datetime import date, datetime
from pathlib import Path
from typing import Any


def dumps_collection(records: list[dict[str, Any]]) -> str:
    """Serialize deterministically: 2-space indent, UTF-8 kept, trailing newline."""
    return json.dumps(records, indent=2, ensure_ascii=False, default=_json_default) + "\n"


def write_collection(path: Path, records: list[dict[str, Any]]) -> None:
    """Atomically overwrite `path` with the JSON array. Creates parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = dumps_collection(records)

    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.chmod(temp_path, _output_mode(path))
        os.replace(temp_path, path)
    except Exception:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


def _output_mode(path: Path) -> int:
    """Keep the mode of the artifact being replaced; a new file gets 0o666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _json_default(value: Any) -> Any:
    # dates nested inside lists/mappings the field tables pass through untouched
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (set, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
