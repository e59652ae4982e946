"""
Front matter parsing — splits a Markdown document into its metadata mapping
and the trimmed body text.

Errors are not swallowed here: the pipeline catches them at the folder boundary
so one bad document only costs its own folder.
"""
from pathlib import Path
from typing import Any

import frontmatter


def parse_document(text: str) -> tuple[dict[str, Any], str]:
    """
    Parse Markdown text into (metadata, body).
    A document without front matter yields an empty mapping and the whole text.
    Raises yaml.YAMLError on broken YAML, ValueError when the block is not a mapping.
    """
    handler = frontmatter.detect_format(text, frontmatter.handlers)
    if handler is None:
        return {}, text.strip()

    block, content = handler.split(text)
    metadata = handler.load(block)
    if metadata is None:
        # empty block between the delimiters
        metadata = {}
    if not isinstance(metadata, dict):
        raise ValueError(
            f"front matter must be a mapping, got {type(metadata).__name__}"
        )
    return dict(metadata), content.strip()


def load_document(path: Path) -> tuple[dict[str, Any], str]:
    """Read and parse one document from disk (UTF-8)."""
    return parse_document(path.read_text(encoding="utf-8"))
