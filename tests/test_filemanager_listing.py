import os
import tempfile
import unittest
from unittest import mock
from datetime import datetime, timezone
from pathlib import Path

from shadefm.apps.filemanager import (
    ActionEntry,
    Folder,
    TextFile,
    build_entities,
    entity_label,
    entity_name,
    _fit_text_to_cells,
)
from shadefm.apps.filemanager import core as fm_core
from shadefm.apps.filemanager.core import NavAction
from shadefm.apps.filemanager.operations import (
    default_file_name,
    list_directory,
    read_file_content,
    write_new_file,
)
from shadefm.core.content import Binary, Text

from _support import write_file


class BuildEntitiesTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_folders_first_then_files_newest_first(self):
        (self.base / "zeta").mkdir()
        (self.base / "alpha").mkdir()
        old = write_file(self.base / "old.txt", "o", mtime=1_000)
        new = write_file(self.base / "new.txt", "n", mtime=3_000)
        mid = write_file(self.base / "mid.txt", "m", mtime=2_000)

        entities = build_entities(list_directory(self.base), is_root=True)

        self.assertEqual(
            entities,
            [
                Folder(self.base / "alpha"),
                Folder(self.base / "zeta"),
                TextFile(new),
                TextFile(mid),
                TextFile(old),
            ],
        )

    def test_equal_mtimes_fall_back_to_path_order(self):
        write_file(self.base / "b.txt", "b", mtime=5_000)
        write_file(self.base / "a.txt", "a", mtime=5_000)
        write_file(self.base / "c.txt", "c", mtime=5_000)

        entities = build_entities(list_directory(self.base), is_root=True)

        self.assertEqual([entity_name(e) for e in entities], ["a.txt", "b.txt", "c.txt"])

    def test_actions_appended_below_root(self):
        write_file(self.base / "f.txt", "f")
        entities = build_entities(list_directory(self.base), is_root=False)
        self.assertEqual(
            entities[-2:],
            [ActionEntry(NavAction.BACK), ActionEntry(NavAction.ROOT)],
        )
        self.assertEqual(len(entities), 3)

    def test_no_actions_at_root(self):
        entities = build_entities(list_directory(self.base), is_root=True)
        self.assertEqual(entities, [])

    def test_empty_directory_below_root_has_only_actions(self):
        entities = build_entities([], is_root=False)
        self.assertEqual([entity_label(e) for e in entities], ["Back", "Root"])

    def test_vanished_paths_are_skipped(self):
        entities = build_entities([self.base / "missing"], is_root=True)
        self.assertEqual(entities, [])

    def test_files_without_metadata_sort_as_oldest(self):
        a = write_file(self.base / "a", "a", mtime=1_000)
        b = write_file(self.base / "b", "b", mtime=2_000)
        c = write_file(self.base / "c", "c", mtime=3_000)
        real_mtime = fm_core._mtime_or_none

        def mtime(path):
            return None if path == c else real_mtime(path)

        with mock.patch.object(fm_core, "_mtime_or_none", side_effect=mtime):
            entities = build_entities(list_directory(self.base), is_root=True)

        self.assertEqual(entities, [TextFile(b), TextFile(a), TextFile(c)])


class ListDirectoryTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_hidden_entries_can_be_filtered(self):
        write_file(self.base / ".hidden", "h")
        write_file(self.base / "shown", "s")

        self.assertEqual(
            sorted(p.name for p in list_directory(self.base)),
            [".hidden", "shown"],
        )
        self.assertEqual(
            [p.name for p in list_directory(self.base, show_hidden=False)],
            ["shown"],
        )

    def test_missing_directory_raises(self):
        with self.assertRaises(OSError):
            list_directory(self.base / "nope")


class FileContentTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_utf8_file_reads_as_text(self):
        path = write_file(self.base / "note", "héllo\n")
        self.assertEqual(read_file_content(path), Text("héllo\n"))

    def test_invalid_utf8_reads_as_binary(self):
        path = write_file(self.base / "blob", b"\xff\xfe\x00")
        self.assertEqual(read_file_content(path), Binary(b"\xff\xfe\x00"))

    def test_write_new_file_refuses_to_overwrite(self):
        write_new_file(self.base, b"first", "same")
        with self.assertRaises(FileExistsError):
            write_new_file(self.base, b"second", "same")
        self.assertEqual((self.base / "same").read_bytes(), b"first")

    def test_write_new_file_uses_timestamp_name_by_default(self):
        path = write_new_file(self.base, b"data")
        self.assertEqual(path.parent, self.base)
        parsed = datetime.fromisoformat(path.name)
        self.assertEqual(parsed.utcoffset().total_seconds(), 0)

    def test_default_file_name_is_rfc3339_utc(self):
        moment = datetime(2024, 5, 1, 12, 30, 15, tzinfo=timezone.utc)
        self.assertEqual(default_file_name(moment), "2024-05-01T12:30:15+00:00")


class LabelTests(unittest.TestCase):
    def test_labels(self):
        self.assertEqual(entity_label(TextFile(Path("/a/b.txt"))), "b.txt")
        self.assertEqual(entity_label(Folder(Path("/a/dir"))), "dir")
        self.assertEqual(entity_label(ActionEntry(NavAction.BACK)), "Back")
        self.assertEqual(entity_label(ActionEntry(NavAction.ROOT)), "Root")

    def test_label_falls_back_for_nameless_paths(self):
        self.assertEqual(entity_label(Folder(Path("/"))), "Unknown folder")
        self.assertIsNone(entity_name(ActionEntry(NavAction.ROOT)))

    def test_fit_text_to_cells_pads_and_clips(self):
        self.assertEqual(_fit_text_to_cells("abc", 5), "abc  ")
        self.assertEqual(_fit_text_to_cells("abcdef", 3), "abc")
        self.assertEqual(_fit_text_to_cells("漢字", 3), "漢 ")
        self.assertEqual(_fit_text_to_cells("x", 0), "")


if __name__ == "__main__":
    unittest.main()
