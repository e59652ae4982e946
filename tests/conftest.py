"""
Shared fixtures: build throwaway content trees under tmp_path and capture
loguru output.
"""
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    root = tmp_path / "public" / "collection"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def write_item(content_root: Path):
    """
    write_item(folder, document, index="index.md", files=None) -> Path

    Creates <content_root>/<folder>/<index> with `document` as its text (skipped
    when document is None) plus any extra sidecar files {name: text|bytes}.
    """
    def _write(folder: str, document: str | None, index: str = "index.md", files: dict | None = None) -> Path:
        path = content_root / folder
        path.mkdir(parents=True, exist_ok=True)
        if document is not None:
            (path / index).write_text(document, encoding="utf-8")
        for name, data in (files or {}).items():
            if isinstance(data, bytes):
                (path / name).write_bytes(data)
            else:
                (path / name).write_text(data, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_messages():
    """Collect every loguru message emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
