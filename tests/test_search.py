"""
Test suite for content search and note listing.
"""

import pytest

from obsidian_finder.core.search_operations import list_notes, search_notes
from obsidian_finder.errors import InvalidPath, NotFound


@pytest.fixture
def search_vault(vault, write_note):
    """Create a test vault with notes in nested folders."""
    write_note("upper.md", "# Greeting\nHello World\n")
    write_note("lower.md", "intro\nhello world\nbye\n")
    write_note(
        "projects/draft.md",
        "---\nstatus: draft\ntags: [writing]\n---\nFirst line\nHello again\n",
    )
    write_note("projects/archive/old.md", "nothing to see\n")
    write_note("image.png", "hello binary-ish")
    return vault


class TestContentSearch:
    """Line-oriented substring matching."""

    def test_case_insensitive_matches_both(self, search_vault):
        results = search_notes(search_vault, "hello world", case_sensitive=False)

        assert [match.path for match in results.matches] == ["lower.md", "upper.md"]
        assert results.skipped == []

    def test_case_sensitive_matches_exact_case_only(self, search_vault):
        results = search_notes(search_vault, "hello", case_sensitive=True)

        assert [match.path for match in results.matches] == ["lower.md"]

    def test_hits_carry_one_based_line_numbers(self, search_vault):
        results = search_notes(search_vault, "hello", case_sensitive=True)

        hit = results.matches[0].hits[0]
        assert hit.line == 2
        assert hit.text == "hello world"
        assert hit.section == "body"

    def test_one_hit_per_matching_line(self, vault, write_note):
        write_note("repeat.md", "apple\nbanana\napple pie\n")
        results = search_notes(vault, "apple")

        assert [(hit.line, hit.text) for hit in results.matches[0].hits] == [
            (1, "apple"),
            (3, "apple pie"),
        ]

    def test_line_numbers_count_newlines_only(self, vault, write_note):
        write_note("feed.md", "a\x0cb\nneedle\r\nend needle too\n")
        results = search_notes(vault, "needle")

        assert [(hit.line, hit.text) for hit in results.matches[0].hits] == [
            (2, "needle"),
            (3, "end needle too"),
        ]

    def test_traversal_order_is_depth_first_by_name(self, search_vault):
        results = search_notes(search_vault, "e")

        assert [match.path for match in results.matches] == [
            "lower.md",
            "projects/archive/old.md",
            "projects/draft.md",
            "upper.md",
        ]

    def test_non_markdown_files_are_ignored(self, search_vault):
        results = search_notes(search_vault, "binary-ish")
        assert results.matches == []


class TestFrontmatterSearch:
    """Frontmatter is only searched on request."""

    def test_frontmatter_excluded_by_default(self, search_vault):
        results = search_notes(search_vault, "draft")
        assert results.matches == []

    def test_frontmatter_included_when_requested(self, search_vault):
        results = search_notes(search_vault, "draft", include_frontmatter=True)

        assert len(results.matches) == 1
        match = results.matches[0]
        assert match.path == "projects/draft.md"
        assert [(hit.section, hit.line, hit.text) for hit in match.hits] == [
            ("frontmatter", 1, "status: draft"),
        ]

    def test_body_is_searched_after_frontmatter(self, search_vault):
        results = search_notes(search_vault, "again", include_frontmatter=True)

        hits = results.matches[0].hits
        assert [(hit.section, hit.line) for hit in hits] == [("body", 2)]


class TestPartialFailure:
    """One bad note must not void the rest of the search."""

    def test_invalid_frontmatter_is_skipped_and_reported(self, vault, write_note):
        write_note("bad.md", "---\nkey: [unclosed\n---\nhello\n")
        write_note("good.md", "hello\n")

        results = search_notes(vault, "hello")

        assert [match.path for match in results.matches] == ["good.md"]
        assert [entry["path"] for entry in results.skipped] == ["bad.md"]
        assert "invalid YAML" in results.skipped[0]["error"]

    def test_undecodable_note_is_skipped(self, vault, write_note):
        (vault.path / "binary.md").write_bytes(b"\xff\xfe\x00hello")
        write_note("good.md", "hello\n")

        results = search_notes(vault, "hello")

        assert [match.path for match in results.matches] == ["good.md"]
        assert [entry["path"] for entry in results.skipped] == ["binary.md"]

    def test_skip_is_logged(self, vault, write_note, caplog):
        write_note("bad.md", "---\n- not\n- a mapping\n---\nhello\n")

        with caplog.at_level("WARNING"):
            search_notes(vault, "hello")

        assert "bad.md" in caplog.text


class TestSearchScope:
    def test_search_limited_to_folder(self, search_vault):
        results = search_notes(search_vault, "hello", folder="projects")
        assert [match.path for match in results.matches] == ["projects/draft.md"]

    def test_search_missing_folder_raises(self, search_vault):
        with pytest.raises(NotFound):
            search_notes(search_vault, "hello", folder="missing")

    def test_search_folder_outside_vault_raises(self, search_vault):
        with pytest.raises(InvalidPath):
            search_notes(search_vault, "hello", folder="..")


class TestListNotes:
    def test_non_recursive_lists_immediate_notes(self, search_vault):
        assert list_notes(search_vault) == ["lower.md", "upper.md"]

    def test_recursive_walks_depth_first(self, search_vault):
        assert list_notes(search_vault, recursive=True) == [
            "lower.md",
            "projects/archive/old.md",
            "projects/draft.md",
            "upper.md",
        ]

    def test_subfolder(self, search_vault):
        assert list_notes(search_vault, folder="projects") == ["projects/draft.md"]
        assert list_notes(search_vault, folder="projects", recursive=True) == [
            "projects/archive/old.md",
            "projects/draft.md",
        ]

    def test_missing_folder_raises(self, search_vault):
        with pytest.raises(NotFound):
            list_notes(search_vault, folder="nope")

    def test_empty_vault(self, vault):
        assert list_notes(vault, recursive=True) == []
