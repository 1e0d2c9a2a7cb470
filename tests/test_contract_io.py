import json
import tempfile
import unittest
from pathlib import Path

from entrylayout.io import dumps, entries_from_doc, load_entries, placements_to_doc
from entrylayout.model import identity_for
from entrylayout.order import by_label, chain, dragged_last
from entrylayout.resolver import resolve
from entrylayout.adapters import TimeBoundsAdapter
from entrylayout.validate import LayoutArgumentError, assert_valid_entries, validate_entries, validate_entries_doc
from entrylayout.model import TemporalEntry

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURE = REPO_ROOT / "tests" / "fixtures" / "day_entries_v1.json"
H = 60 * 60000
M = 60000


class TestEntriesDocContract(unittest.TestCase):
    def test_fixture_loads(self) -> None:
        entries = load_entries(FIXTURE)
        by_key = {e.key: e for e in entries}

        self.assertEqual(len(entries), 8)
        self.assertTrue(by_key["offsite"].is_full_span)
        self.assertFalse(by_key["hidden"].visible)
        self.assertTrue(by_key["standup-drag"].dragged)
        self.assertEqual(by_key["standup"].pref_height, 40.0)
        self.assertEqual(by_key["standup"].label, "Standup")
        # a drag copy is the same logical entry as its source
        self.assertEqual(by_key["standup"].identity, by_key["standup-drag"].identity)
        self.assertEqual(by_key["focus-drag"].identity, identity_for("focus"))
        self.assertTrue(by_key["focus-drag"].dragged)
        self.assertEqual(by_key["review"].identity, identity_for("review"))

    def test_fixture_day_layout(self) -> None:
        entries = load_entries(FIXTURE)
        placements = resolve(entries, TimeBoundsAdapter("UTC"), chain(by_label, dragged_last))

        self.assertEqual(
            [(p.entry.key, p.column_index, p.column_count) for p in placements],
            [
                ("offsite", 0, 3),
                ("review", 1, 3),
                ("lunch", 1, 3),
                ("focus", 1, 3),
                ("focus-drag", 1, 3),
                ("standup", 2, 3),
                ("standup-drag", 2, 3),
            ],
        )

    def test_invalid_documents_are_reported(self) -> None:
        self.assertEqual(validate_entries_doc([]), ["document must be a JSON object"])
        self.assertEqual(validate_entries_doc({"entries": {}}), ["entries must be a list"])

        errs = validate_entries_doc(
            {
                "schema": "entrylayout.entries.v1",
                "entries": [
                    {"id": "a", "start_ms": "x", "end_ms": 10},
                    {"id": "a", "start_ms": 20, "end_ms": 10, "full_day": "yes"},
                    "nope",
                ],
            }
        )
        self.assertIn("entries[0].start_ms must be int", errs)
        self.assertIn("entries[1].id duplicates entries[0]: 'a'", errs)
        self.assertIn("entries[1] end_ms must be >= start_ms", errs)
        self.assertIn("entries[1].full_day must be bool", errs)
        self.assertIn("entries[2] must be an object", errs)

        errs = validate_entries_doc({"schema": "other", "entries": []})
        self.assertEqual(len(errs), 1)
        self.assertIn("schema must be", errs[0])

    def test_recurrence_instances_still_collide(self) -> None:
        # hourly series of 90 minute meetings: neighbouring instances overlap
        doc = {
            "entries": [
                {"id": "r-1", "start_ms": 9 * H, "end_ms": 10 * H + 30 * M, "recurrence_source": "s"},
                {"id": "r-2", "start_ms": 10 * H, "end_ms": 11 * H + 30 * M, "recurrence_source": "s"},
            ]
        }
        entries = entries_from_doc(doc)
        self.assertNotEqual(entries[0].identity, entries[1].identity)

        placements = resolve(entries, TimeBoundsAdapter("UTC"))
        self.assertEqual([(p.entry.key, p.column_index, p.column_count) for p in placements], [("r-1", 0, 2), ("r-2", 1, 2)])

    def test_drag_of_links_ghost_to_plain_entry(self) -> None:
        doc = {
            "entries": [
                {"id": "a", "start_ms": 0, "end_ms": H},
                {"id": "a-drag", "start_ms": H // 2, "end_ms": H + H // 2, "dragged": True, "drag_of": "a"},
                {"id": "b", "start_ms": H // 2, "end_ms": H},
            ]
        }
        entries = entries_from_doc(doc)
        self.assertEqual(entries[1].identity, identity_for("a"))

        placements = resolve(entries, TimeBoundsAdapter("UTC"))
        self.assertEqual(
            [(p.entry.key, p.column_index, p.column_count) for p in placements],
            [("a", 0, 2), ("a-drag", 0, 2), ("b", 1, 2)],
        )

    def test_drag_of_must_name_a_source_entry(self) -> None:
        errs = validate_entries_doc(
            {
                "entries": [
                    {"id": "a", "start_ms": 0, "end_ms": 1},
                    {"id": "b", "start_ms": 0, "end_ms": 1, "drag_of": "missing"},
                    {"id": "c", "start_ms": 0, "end_ms": 1, "drag_of": "c"},
                    {"id": "d", "start_ms": 0, "end_ms": 1, "drag_of": "a", "dragged": False},
                    {"id": "e", "start_ms": 0, "end_ms": 1, "drag_of": "d"},
                ]
            }
        )
        self.assertEqual(
            errs,
            [
                "entries[3].drag_of requires dragged=true",
                "entries[1].drag_of must name an entry id, got 'missing'",
                "entries[2].drag_of must not name the entry itself",
                "entries[4].drag_of names another drag copy: 'd'",
            ],
        )

    def test_entries_from_doc_raises_value_error(self) -> None:
        with self.assertRaises(ValueError) as cm:
            entries_from_doc({"entries": [{"id": "", "start_ms": 0, "end_ms": 1}]})
        self.assertIn("entries[0].id must be non-empty string", str(cm.exception))

    def test_load_entries_from_file(self) -> None:
        doc = {"entries": [{"id": "a", "start_ms": 0, "end_ms": 10}]}
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "entries.json"
            p.write_text(json.dumps(doc), encoding="utf-8")
            entries = load_entries(p)
        self.assertEqual([(e.key, e.start, e.end, e.visible) for e in entries], [("a", 0, 10, True)])


class TestValidateEntries(unittest.TestCase):
    def test_precondition_checks(self) -> None:
        ok = TemporalEntry(start=0, end=10)
        backwards = TemporalEntry(start=10, end=0)
        full = TemporalEntry(start=10, end=0, is_full_span=True)

        self.assertEqual(validate_entries([ok, full]), [])
        self.assertEqual(validate_entries([backwards]), ["entries[0] start must be <= end"])
        self.assertEqual(validate_entries(["x"]), ["entries[0] must be TemporalEntry, got str"])
        self.assertEqual(validate_entries("abc"), ["entries must be a sequence"])

        assert_valid_entries([ok])
        with self.assertRaises(LayoutArgumentError):
            assert_valid_entries([ok, backwards])


class TestPlacementsDocContract(unittest.TestCase):
    def test_doc_shape_and_dumps(self) -> None:
        entries = [
            TemporalEntry(start=0, end=10, identity="a", key="a"),
            TemporalEntry(start=0, end=10, identity="b", key="b"),
        ]
        doc = placements_to_doc(resolve(entries), content_width=100.0)

        self.assertEqual(doc["schema"], "entrylayout.placements.v1")
        self.assertEqual(
            doc["placements"],
            [
                {"id": "a", "cluster_index": 0, "column_index": 0, "column_count": 2, "x": 0.0, "width": 50.0},
                {"id": "b", "cluster_index": 0, "column_index": 1, "column_count": 2, "x": 50.0, "width": 50.0},
            ],
        )
        self.assertEqual(doc["summary"], {"entry_count": 2, "cluster_count": 1, "max_columns": 2, "overlap_count": 2})

        text = dumps(doc)
        self.assertEqual(json.loads(text), doc)
        self.assertLess(text.index('"placements"'), text.index('"schema"'))

    def test_io_exports_only_document_helpers(self) -> None:
        import entrylayout.io as io

        self.assertEqual(
            sorted(io.__all__),
            ["ENTRIES_SCHEMA", "PLACEMENTS_SCHEMA", "dumps", "entries_from_doc", "load_entries", "placements_to_doc"],
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)
