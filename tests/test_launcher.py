"""Tests for running listed programs and describing how they ended."""

from __future__ import annotations

import os
import stat
import sys
import tempfile
import unittest
from pathlib import Path

from gameshelf.errors import LaunchFailure
from gameshelf.launcher import describe_exit, launch_program


def _script(directory: Path, body: str) -> Path:
    path = directory / "game.sh"
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


@unittest.skipIf(sys.platform == "win32", "shell scripts need a POSIX shell")
class LaunchProgramTests(unittest.TestCase):
    def test_returns_exit_status(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(launch_program(str(_script(Path(tmp), "exit 0"))), 0)
            self.assertEqual(launch_program(str(_script(Path(tmp), "exit 3"))), 3)

    def test_runs_from_program_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            script = _script(root, 'pwd > "$(dirname "$0")/cwd.txt"')
            previous_cwd = Path.cwd()
            try:
                os.chdir(tempfile.gettempdir())
                launch_program(str(script))
            finally:
                os.chdir(previous_cwd)
            self.assertEqual(Path((root / "cwd.txt").read_text(encoding="utf-8").strip()).resolve(), root)

    def test_missing_or_non_executable_program_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(LaunchFailure) as ctx:
                launch_program(str(Path(tmp) / "nope"))
            self.assertIn("nope", str(ctx.exception))

            plain = Path(tmp) / "readme.txt"
            plain.write_text("not a program", encoding="utf-8")
            with self.assertRaises(LaunchFailure):
                launch_program(str(plain))


class DescribeExitTests(unittest.TestCase):
    def test_describe_exit(self) -> None:
        self.assertIsNone(describe_exit(0))
        self.assertEqual(describe_exit(2), "error code: 2")
        self.assertEqual(describe_exit(-9), "terminated by signal 9")


if __name__ == "__main__":
    unittest.main()
