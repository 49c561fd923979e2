"""
Tests for the FilePath value type.
"""

import dataclasses
import unittest

from pathment_scanner.core.file_path import FilePath


class TestFilePath(unittest.TestCase):
    def test_drive_only_gets_root_marker(self):
        fp = FilePath(False, "C:", "", "", "")
        self.assertEqual(fp.directories, "\\")
        self.assertEqual(fp.path_without_protocol, "C:\\")

    def test_full_name(self):
        self.assertEqual(FilePath(False, "", "/home/", "a", "txt").full_name, "a.txt")
        self.assertEqual(FilePath(False, "", "/home/", "a", "").full_name, "a")
        self.assertEqual(FilePath(False, "", "/home/", "", "").full_name, "")

    def test_full_path_without_scheme(self):
        fp = FilePath(False, "C:", "\\Users\\", "doc", "txt")
        self.assertEqual(fp.full_path, "C:\\Users\\doc.txt")

    def test_full_path_scheme_with_drive(self):
        fp = FilePath(True, "C:", "\\Users\\", "doc", "txt")
        self.assertEqual(fp.full_path, "file:///C:/Users/doc.txt")
        self.assertEqual(fp.path_without_protocol, "C:\\Users\\doc.txt")

    def test_full_path_scheme_without_drive(self):
        fp = FilePath(True, "", "/home/a/", "b", "txt")
        self.assertEqual(fp.full_path, "file:///home/a/b.txt")

    def test_structurally_complete(self):
        self.assertTrue(FilePath(False, "C:", "\\x\\", "y", "").is_structurally_complete())
        self.assertFalse(FilePath(False, "", "/x/", "y", "").is_structurally_complete())

    def test_frozen(self):
        fp = FilePath(False, "", "/x/", "y", "z")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            fp.extension = "q"


if __name__ == "__main__":
    unittest.main()
