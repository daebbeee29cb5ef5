"""Tests for filesystem operations — discovery, exclusion, I/O."""

from pathlib import Path

import pytest

from mintcompat.infrastructure.filesystem import (
    find_documents,
    is_excluded,
    read_document,
    write_document,
)


class TestIsExcluded:
    @pytest.mark.parametrize(
        ("relative", "expected"),
        [
            ("zh-CN/index.md", True),
            ("guide/zh-CN/index.md", True),
            ("guide/index.md", False),
            ("zh-CN.md", False),
        ],
    )
    def test_double_star_prefix(self, relative: str, expected: bool) -> None:
        assert is_excluded(relative, ["**/zh-CN/**"]) is expected

    def test_plain_glob(self) -> None:
        assert is_excluded("drafts/a.md", ["drafts/*"])
        assert not is_excluded("guide/a.md", ["drafts/*"])

    def test_no_patterns(self) -> None:
        assert not is_excluded("anything.md", [])


class TestFindDocuments:
    def test_finds_markdown_sorted(self, project_root: Path) -> None:
        docs = project_root / "docs"
        found = find_documents(docs)
        assert found == sorted(
            [docs / "guide" / "plain.md", docs / "index.md", docs / "zh-CN" / "index.md"]
        )

    def test_exclude_globs(self, project_root: Path) -> None:
        docs = project_root / "docs"
        found = find_documents(docs, exclude=["**/zh-CN/**"])
        assert docs / "zh-CN" / "index.md" not in found
        assert len(found) == 2

    def test_custom_suffixes(self, project_root: Path) -> None:
        docs = project_root / "docs"
        assert find_documents(docs, suffixes=[".txt"]) == [docs / "guide" / "notes.txt"]

    def test_skips_tool_directories(self, project_root: Path) -> None:
        docs = project_root / "docs"
        for skipped in (".vitepress", "node_modules"):
            (docs / skipped).mkdir()
            (docs / skipped / "x.md").write_text("cols={2}")
        found = find_documents(docs)
        assert all(".vitepress" not in p.parts and "node_modules" not in p.parts for p in found)

    def test_single_file(self, project_root: Path) -> None:
        page = project_root / "docs" / "index.md"
        assert find_documents(page) == [page]

    def test_single_ineligible_file(self, project_root: Path) -> None:
        assert find_documents(project_root / "docs" / "guide" / "notes.txt") == []


class TestReadWrite:
    def test_roundtrip_preserves_crlf(self, tmp_path: Path) -> None:
        path = tmp_path / "a.md"
        write_document(path, "line one\r\nline two\r\n")
        assert path.read_bytes() == b"line one\r\nline two\r\n"
        assert read_document(path) == "line one\r\nline two\r\n"

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        path = tmp_path / "deep" / "nested" / "a.md"
        write_document(path, "x")
        assert path.read_text() == "x"
