import unittest
from datetime import date, datetime
from pathlib import Path
from tempfile import TemporaryDirectory

from obsidian_finder.core.frontmatter_operations import (
    frontmatter_text,
    get_metadata,
    merge_frontmatter,
    parse_frontmatter,
    serialize_frontmatter,
    validate_frontmatter,
)
from obsidian_finder.data_models import Vault
from obsidian_finder.errors import MetadataParseError, NotFound


class FrontmatterCodecTests(unittest.TestCase):
    def test_parse_frontmatter_handles_metadata_and_content(self) -> None:
        raw = "---\ntitle: Example Note\ntags:\n  - test\n---\n\nBody text."
        metadata, body = parse_frontmatter(raw)
        self.assertEqual(metadata["title"], "Example Note")
        self.assertEqual(metadata["tags"], ["test"])
        self.assertEqual(body, "\nBody text.")

    def test_parse_frontmatter_without_block_returns_original_content(self) -> None:
        raw = "No frontmatter here.\n\n"
        metadata, body = parse_frontmatter(raw)
        self.assertEqual(metadata, {})
        self.assertEqual(body, raw)

    def test_parse_frontmatter_unclosed_block_is_body(self) -> None:
        raw = "---\nnot closed\n"
        metadata, body = parse_frontmatter(raw)
        self.assertEqual(metadata, {})
        self.assertEqual(body, raw)

    def test_parse_frontmatter_empty_block(self) -> None:
        metadata, body = parse_frontmatter("---\n---\nBody")
        self.assertEqual(metadata, {})
        self.assertEqual(body, "Body")

    def test_parse_frontmatter_converts_dates(self) -> None:
        metadata, _ = parse_frontmatter("---\ncreated: 2025-10-27\n---\nBody\n")
        self.assertEqual(metadata["created"], "2025-10-27")

    def test_parse_frontmatter_invalid_yaml_raises(self) -> None:
        with self.assertRaises(MetadataParseError):
            parse_frontmatter("---\nkey: [unclosed\n---\nBody\n")

    def test_parse_frontmatter_non_mapping_raises(self) -> None:
        with self.assertRaises(MetadataParseError):
            parse_frontmatter("---\n- a\n- b\n---\nBody\n")

    def test_serialize_without_metadata_returns_body(self) -> None:
        self.assertEqual(serialize_frontmatter({}, "Just body\n"), "Just body\n")

    def test_serialize_keeps_insertion_order(self) -> None:
        text = serialize_frontmatter({"zeta": 1, "alpha": 2}, "Body")
        self.assertEqual(text, "---\nzeta: 1\nalpha: 2\n---\nBody")

    def test_round_trip_preserves_metadata_and_body(self) -> None:
        metadata = {
            "title": "Round Trip",
            "count": 3,
            "ratio": 0.5,
            "published": False,
            "empty": None,
            "tags": ["a", "b"],
            "project": {"status": "active", "owner": "alice"},
        }
        bodies = [
            "",
            "hello",
            "\n\nleading blank lines\n",
            "# Heading\n\n---\n\ntext\n",
            "---\ninjected: yes\n---\nbody",
            "---\n",
        ]
        for meta in (metadata, {}):
            for body in bodies:
                with self.subTest(metadata=bool(meta), body=body):
                    self.assertEqual(parse_frontmatter(serialize_frontmatter(meta, body)), (meta, body))

    def test_serialize_guards_body_that_looks_like_frontmatter(self) -> None:
        text = serialize_frontmatter({}, "---\ninjected: yes\n---\nbody")
        self.assertEqual(text, "---\n---\n---\ninjected: yes\n---\nbody")

    def test_body_starting_with_rule_survives_round_trip(self) -> None:
        body = "---\nnot: metadata\n"
        text = serialize_frontmatter({"tag": "x"}, body)
        self.assertEqual(parse_frontmatter(text), ({"tag": "x"}, body))

    def test_merge_overwrites_and_retains(self) -> None:
        existing = {"tag": "x", "status": "draft"}
        merged = merge_frontmatter(existing, {"status": "done", "owner": "me"})
        self.assertEqual(merged, {"tag": "x", "status": "done", "owner": "me"})
        self.assertEqual(list(merged), ["tag", "status", "owner"])
        self.assertEqual(existing, {"tag": "x", "status": "draft"})

    def test_frontmatter_text_is_plain_yaml(self) -> None:
        self.assertEqual(frontmatter_text({"status": "draft"}), "status: draft")
        self.assertEqual(frontmatter_text({}), "")


class ValidateFrontmatterTests(unittest.TestCase):
    def test_converts_datetime(self) -> None:
        sanitized = validate_frontmatter({"date": datetime(2025, 1, 1, 12, 0)})
        self.assertEqual(sanitized["date"], "2025-01-01T12:00:00")

    def test_converts_date_and_tuple(self) -> None:
        sanitized = validate_frontmatter({"created": date(2025, 10, 27), "pair": (1, 2)})
        self.assertEqual(sanitized, {"created": "2025-10-27", "pair": [1, 2]})

    def test_rejects_unsupported_types(self) -> None:
        with self.assertRaises(MetadataParseError):
            validate_frontmatter({"bad": {1, 2}})

    def test_rejects_blank_keys(self) -> None:
        with self.assertRaises(MetadataParseError):
            validate_frontmatter({"  ": "value"})

    def test_rejects_non_mapping(self) -> None:
        with self.assertRaises(MetadataParseError):
            validate_frontmatter(["not", "a", "mapping"])

    def test_rejects_oversized_metadata(self) -> None:
        with self.assertRaises(MetadataParseError):
            validate_frontmatter({"blob": "x" * 20_000})


class GetMetadataTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.vault_path = Path(self.tmpdir.name).resolve()
        self.vault = Vault(name="test", path=self.vault_path)

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write_note(self, name: str, content: str) -> Path:
        note_path = self.vault_path / name
        note_path.parent.mkdir(parents=True, exist_ok=True)
        note_path.write_text(content, encoding="utf-8")
        return note_path

    def test_returns_metadata_only(self) -> None:
        self._write_note("example.md", "---\nstatus: active\n---\nContent\n")
        self.assertEqual(get_metadata(self.vault, "example.md"), {"status": "active"})

    def test_accepts_path_without_extension(self) -> None:
        self._write_note("folder/example.md", "---\nstatus: active\n---\nContent\n")
        self.assertEqual(get_metadata(self.vault, "folder/example"), {"status": "active"})

    def test_note_without_frontmatter_has_empty_metadata(self) -> None:
        self._write_note("plain.md", "Content only.")
        self.assertEqual(get_metadata(self.vault, "plain.md"), {})

    def test_missing_note_raises_not_found(self) -> None:
        with self.assertRaises(NotFound):
            get_metadata(self.vault, "missing.md")

    def test_malformed_frontmatter_is_surfaced(self) -> None:
        self._write_note("broken.md", "---\nkey: [unclosed\n---\nBody\n")
        with self.assertRaises(MetadataParseError):
            get_metadata(self.vault, "broken.md")


if __name__ == "__main__":
    unittest.main()
