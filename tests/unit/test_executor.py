import unittest
import tempfile
from pathlib import Path
from types import MappingProxyType
from unittest.mock import patch
from file_sorter.executor import apply_plan, create_directories, move_file, ExecutionError
from file_sorter.planning import Plan


class TestExecutor(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()

    def tearDown(self):
        self._tmp.cleanup()

    def _plan(self, dirs, renames):
        return Plan(
            root=self.root,
            directories_to_create=frozenset(self.root / d for d in dirs),
            renames=MappingProxyType({self.root / o: self.root / n for o, n in renames.items()}),
        )

    def test_apply_plan(self):
        """Folders are created and files moved."""
        (self.root / "a.csv").write_text("1,2")
        (self.root / "notes").write_text("x")
        plan = self._plan(
            ["_csv", "_no_ext"],
            {"a.csv": "_csv/a.csv", "notes": "_no_ext/notes"},
        )

        report = apply_plan(plan)

        self.assertEqual((self.root / "_csv" / "a.csv").read_text(), "1,2")
        self.assertTrue((self.root / "_no_ext" / "notes").is_file())
        self.assertFalse((self.root / "a.csv").exists())
        self.assertEqual(report["created_folders_count"], 2)
        self.assertEqual(report["executed_moves_count"], 2)
        self.assertFalse(report["dry_run"])

    def test_dry_run_touches_nothing(self):
        (self.root / "a.csv").touch()
        plan = self._plan(["_csv"], {"a.csv": "_csv/a.csv"})

        report = apply_plan(plan, dry_run=True)

        self.assertTrue((self.root / "a.csv").exists())
        self.assertFalse((self.root / "_csv").exists())
        self.assertEqual(report["executed_moves_count"], 1)
        self.assertTrue(report["dry_run"])

    def test_create_directories_is_idempotent(self):
        (self.root / "_csv").mkdir()
        created = create_directories({self.root / "_csv", self.root / "_txt" / "sub"})

        self.assertEqual(created, [self.root / "_txt" / "sub"])
        self.assertTrue((self.root / "_txt" / "sub").is_dir())

    def test_move_refuses_to_overwrite(self):
        (self.root / "a.csv").write_text("new")
        (self.root / "_csv").mkdir()
        (self.root / "_csv" / "a.csv").write_text("old")

        with self.assertRaises(ExecutionError):
            move_file(self.root / "a.csv", self.root / "_csv" / "a.csv")

        self.assertEqual((self.root / "_csv" / "a.csv").read_text(), "old")
        self.assertEqual((self.root / "a.csv").read_text(), "new")

    def test_move_missing_source(self):
        (self.root / "_csv").mkdir()
        with self.assertRaises(ExecutionError):
            move_file(self.root / "gone.csv", self.root / "_csv" / "gone.csv")

    def test_fail_fast_on_move(self):
        """The first failed move stops the run, earlier moves stay done."""
        for name in ("a.csv", "b.csv", "c.csv"):
            (self.root / name).touch()
        (self.root / "_csv").mkdir()
        (self.root / "_csv" / "b.csv").touch()

        plan = self._plan(
            [],
            {"a.csv": "_csv/a.csv", "b.csv": "_csv/b.csv", "c.csv": "_csv/c.csv"},
        )

        with self.assertRaises(ExecutionError):
            apply_plan(plan)

        self.assertTrue((self.root / "_csv" / "a.csv").exists())
        self.assertTrue((self.root / "b.csv").exists())
        self.assertTrue((self.root / "c.csv").exists())
        self.assertFalse((self.root / "_csv" / "c.csv").exists())

    @patch("file_sorter.executor.move_file")
    @patch.object(Path, "mkdir")
    def test_folder_failure_stops_before_moves(self, mock_mkdir, mock_move):
        mock_mkdir.side_effect = PermissionError(13, "Permission denied")
        (self.root / "a.csv").touch()
        plan = self._plan(["_csv"], {"a.csv": "_csv/a.csv"})

        with self.assertRaises(ExecutionError):
            apply_plan(plan)

        mock_move.assert_not_called()
        self.assertTrue((self.root / "a.csv").exists())

    def test_empty_plan(self):
        plan = self._plan([], {})
        report = apply_plan(plan)

        self.assertEqual(report["created_folders_count"], 0)
        self.assertEqual(report["executed_moves_count"], 0)
        self.assertEqual(list(self.root.iterdir()), [])


if __name__ == "__main__":
    unittest.main()
