"""
Unit tests for the content helpers: front matter, dates and sidecar assets.
"""
from datetime import date, datetime, timezone

import pytest
import yaml

from labsite.content.assets import (
    FEATURED_IMAGES,
    list_entries,
    match_sidecar,
    public_path,
    read_sidecar,
)
from labsite.content.dates import date_text, newest_first, parse_date
from labsite.content.frontmatter import load_document, parse_document


class TestFrontMatter:
    """Test splitting documents into metadata and body."""

    def test_parse_document(self):
        """Metadata keeps YAML types, body is trimmed."""
        text = (
            "---\n"
            "title: Wearables workshop\n"
            "date: 2023-05-01\n"
            "tags: [sensors, health]\n"
            "organizations:\n"
            "  - name: UVA\n"
            "    url: https://engineering.virginia.edu\n"
            "---\n"
            "\n"
            "  The lab hosted a workshop.  \n\n"
        )
        metadata, body = parse_document(text)
        assert metadata["title"] == "Wearables workshop"
        assert metadata["date"] == date(2023, 5, 1)
        assert metadata["tags"] == ["sensors", "health"]
        assert metadata["organizations"][0]["name"] == "UVA"
        assert body == "The lab hosted a workshop."

    def test_document_without_front_matter(self):
        """Plain Markdown yields empty metadata and the whole text as body."""
        metadata, body = parse_document("Just a paragraph.\n")
        assert metadata == {}
        assert body == "Just a paragraph."

    def test_broken_yaml_raises(self):
        """Broken YAML is not swallowed; the pipeline handles it per folder."""
        with pytest.raises(yaml.YAMLError):
            parse_document("---\ntitle: [unclosed, list\n---\nbody\n")

    def test_list_front_matter_raises(self):
        """A YAML list between the delimiters is not metadata."""
        with pytest.raises(ValueError):
            parse_document("---\n- a\n- b\n---\nbody\n")

    def test_scalar_front_matter_raises(self):
        with pytest.raises(ValueError):
            parse_document("---\njust a sentence\n---\nbody\n")

    def test_empty_front_matter(self):
        assert parse_document("---\n---\nBody text\n") == ({}, "Body text")

    def test_load_document_reads_utf8(self, tmp_path):
        path = tmp_path / "index.md"
        path.write_text("---\ntitle: Zürich visit\n---\nGrüße\n", encoding="utf-8")
        metadata, body = load_document(path)
        assert metadata["title"] == "Zürich visit"
        assert body == "Grüße"


class TestDates:
    """Test date parsing, rendering and ordering."""

    def test_parse_date_shapes(self):
        """YAML dates, datetimes, ints and partial/free-form strings all parse."""
        assert parse_date(date(2023, 5, 1)) == date(2023, 5, 1)
        assert parse_date(datetime(2023, 5, 1, 9, 30, tzinfo=timezone.utc)) == date(2023, 5, 1)
        assert parse_date(2021) == date(2021, 1, 1)
        assert parse_date("2023-05-01") == date(2023, 5, 1)
        assert parse_date("2023-05") == date(2023, 5, 1)
        assert parse_date("2019") == date(2019, 1, 1)
        assert parse_date("2023-05-01T10:00:00Z") == date(2023, 5, 1)
        assert parse_date("March 3, 2020") == date(2020, 3, 3)

    def test_parse_date_rejects_garbage(self):
        assert parse_date(None) is None
        assert parse_date("") is None
        assert parse_date("   ") is None
        assert parse_date("someday") is None
        assert parse_date(True) is None

    def test_date_text(self):
        assert date_text(date(2023, 5, 1)) == "2023-05-01"
        assert date_text("2023-05") == "2023-05"
        assert date_text(None) == ""

    def test_newest_first_puts_undated_last(self):
        """Valid dates sort descending; missing and unparseable dates come last."""
        records = [
            {"id": "old", "date": "2022-01-01"},
            {"id": "undated", "date": ""},
            {"id": "new", "date": "2024-06-01"},
            {"id": "garbage", "date": "tbd"},
        ]
        ordered = [r["id"] for r in newest_first(records, "date")]
        assert ordered == ["new", "old", "garbage", "undated"]

    def test_newest_first_ties_break_on_id(self):
        records = [
            {"id": "b", "date": "2024-01-01"},
            {"id": "a", "date": "2024-01-01"},
        ]
        assert [r["id"] for r in newest_first(records, "date")] == ["a", "b"]


class TestSidecarAssets:
    """Test convention-based sidecar discovery."""

    def test_match_is_case_insensitive(self):
        assert match_sidecar(["Featured.PNG", "index.md"], FEATURED_IMAGES) == "Featured.PNG"

    def test_first_candidate_wins(self):
        """featured.jpg beats featured.png regardless of listing order."""
        entries = ["featured.png", "featured.jpg"]
        assert match_sidecar(entries, FEATURED_IMAGES) == "featured.jpg"

    def test_no_match(self):
        assert match_sidecar(["index.md", "photo.jpg"], FEATURED_IMAGES) is None

    def test_list_entries_skips_directories(self, tmp_path):
        (tmp_path / "featured.jpg").write_bytes(b"\xff\xd8")
        (tmp_path / "featured.png").mkdir()
        assert list_entries(tmp_path) == ["featured.jpg"]

    def test_list_entries_missing_folder(self, tmp_path):
        """A folder that cannot be listed simply has no assets."""
        assert list_entries(tmp_path / "missing") == []

    def test_public_path(self):
        assert public_path("/news", "2023-award", "featured.png") == "/news/2023-award/featured.png"
        assert public_path("/news/", "2023-award", "featured.png") == "/news/2023-award/featured.png"

    def test_read_sidecar(self, tmp_path):
        (tmp_path / "cite.bib").write_text("@article{x, title={Y}}\n", encoding="utf-8")
        assert read_sidecar(tmp_path, "cite.bib") == "@article{x, title={Y}}\n"
        assert read_sidecar(tmp_path, "missing.bib") is None
