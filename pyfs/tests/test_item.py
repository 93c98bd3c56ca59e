#!/usr/bin/env python3
"""
PyFS Item Tests

Behaviour shared by every item: naming, timestamps, rename, move,
rooting, termination and paths.

Run with: python -m pytest pyfs/tests/test_item.py -v

Author: YSNRFD
Version: 1.0.0
"""

import time
import unittest

from pyfs.core import ConfigLoader
from pyfs.exceptions import (
    InvalidArgumentError,
    ItemNotWritableError,
    IllegalItemStateError,
    ItemCannotBeRootError,
)
from pyfs.filesystem import Directory, File, Link, FileType


class ItemTestCase(unittest.TestCase):
    """
    Shared fixture:

        /map1
            bestand1.txt
            map2/
                bestand2.txt
                map3/
        /map4   (read-only)
        /map5
    """

    def setUp(self):
        ConfigLoader().reset()
        self.map1 = Directory("map1")
        self.map2 = Directory("map2", self.map1)
        self.map3 = Directory("map3", self.map2)
        self.map4 = Directory("map4", writable=False)
        self.map5 = Directory("map5")
        self.bestand1 = File(self.map1, "bestand1", FileType.TEXT, 100)
        self.bestand2 = File(self.map2, "bestand2", FileType.TEXT, 600)

    def tearDown(self):
        ConfigLoader().reset()


class TestNaming(ItemTestCase):
    """Test name validity and defaults."""

    def test_valid_names(self):
        """Test the per-kind name patterns."""
        self.assertTrue(Directory.is_valid_name("my-dir_2"))
        self.assertFalse(Directory.is_valid_name("my.dir"))
        self.assertTrue(File.is_valid_name("archive.tar"))
        self.assertTrue(Link.is_valid_name("short.cut"))
        self.assertFalse(File.is_valid_name("with space"))
        self.assertFalse(File.is_valid_name(""))
        self.assertFalse(Directory.is_valid_name(None))

    def test_invalid_name_gets_default(self):
        """Test the fallback to the default name."""
        self.assertEqual(Directory("not valid!").name, "new_item")
        self.assertEqual(File(self.map5, "a b", FileType.TEXT).name, "new_item")

    def test_default_name_from_config(self):
        """Test that the default name is read from configuration."""
        ConfigLoader().set("filesystem.default_item_name", "untitled")
        self.assertEqual(Directory("?").name, "untitled")

    def test_name_pattern_from_config(self):
        """Test that name patterns are read from configuration."""
        ConfigLoader().set("naming.directory_pattern", "[a-z]+")
        self.assertFalse(Directory.is_valid_name("ABC"))
        self.assertTrue(Directory.is_valid_name("abc"))

    def test_ordering(self):
        """Test case-insensitive ordering against items and names."""
        self.assertTrue(self.bestand1.is_ordered_before(self.map2))
        self.assertTrue(self.map2.is_ordered_after("BESTAND1"))
        self.assertFalse(self.map2.is_ordered_before("MAP2"))
        self.assertFalse(self.map2.is_ordered_after("Map2"))
        self.assertFalse(self.map2.is_ordered_before(None))


class TestTimestamps(ItemTestCase):
    """Test creation and modification times."""

    def test_initial_times(self):
        """Test times of a fresh item."""
        item = Directory("fresh")
        self.assertLessEqual(item.creation_time, time.time())
        self.assertTrue(Directory.is_valid_creation_time(item.creation_time))
        self.assertIsNone(item.modification_time)

    def test_modification_time_after_rename(self):
        """Test that a rename records a modification."""
        self.map5.rename("renamed")
        self.assertIsNotNone(self.map5.modification_time)
        self.assertGreaterEqual(self.map5.modification_time, self.map5.creation_time)
        self.assertTrue(self.map5.can_have_as_modification_time(self.map5.modification_time))

    def test_timestamp_checks(self):
        """Test the timestamp predicates."""
        self.assertFalse(Directory.is_valid_creation_time(None))
        self.assertFalse(Directory.is_valid_creation_time(time.time() + 100))
        self.assertTrue(self.map5.can_have_as_modification_time(None))
        self.assertFalse(self.map5.can_have_as_modification_time(self.map5.creation_time - 10))
        self.assertFalse(self.map5.can_have_as_modification_time(time.time() + 100))

    def test_overlapping_use_period(self):
        """Test use-period overlap."""
        first = Directory("first")
        first.rename("first2")
        time.sleep(0.05)
        second = Directory("second")
        second.rename("second2")

        self.assertFalse(first.has_overlapping_use_period(second))
        self.assertFalse(second.has_overlapping_use_period(first))

        time.sleep(0.05)
        first.rename("first3")
        self.assertTrue(first.has_overlapping_use_period(second))
        self.assertTrue(second.has_overlapping_use_period(first))

    def test_touching_use_periods(self):
        """Test that back-to-back use periods do not overlap."""
        first = Directory("first")
        second = Directory("second")
        first._creation_time, first._modification_time = 1.0, 2.0
        second._creation_time, second._modification_time = 2.0, 3.0

        self.assertFalse(first.has_overlapping_use_period(second))
        self.assertFalse(second.has_overlapping_use_period(first))

        second._creation_time = 1.5
        self.assertTrue(first.has_overlapping_use_period(second))
        self.assertTrue(second.has_overlapping_use_period(first))

    def test_use_period_requires_modification(self):
        """Test that unmodified items have no use period."""
        untouched = Directory("untouched")
        self.map5.rename("touched")

        self.assertFalse(self.map5.has_overlapping_use_period(untouched))
        self.assertFalse(untouched.has_overlapping_use_period(self.map5))
        self.assertFalse(self.map5.has_overlapping_use_period(None))


class TestRename(ItemTestCase):
    """Test renaming."""

    def test_rename_restores_order(self):
        """Test that the parent stays sorted after a rename."""
        self.assertEqual(self.map2.children, (self.bestand2, self.map3))
        self.map3.rename("a")

        self.assertEqual(self.map3.name, "a")
        self.assertEqual(self.map2.children, (self.map3, self.bestand2))
        self.assertTrue(self.map2.has_proper_children())

    def test_rename_to_sibling_name(self):
        """Test that a clash leaves everything unchanged."""
        with self.assertRaises(InvalidArgumentError):
            self.map3.rename("Bestand2")

        self.assertEqual(self.map3.name, "map3")
        self.assertEqual(self.map2.children, (self.bestand2, self.map3))

    def test_rename_case_only(self):
        """Test renaming to a different case of the same name."""
        self.map3.rename("MAP3")
        self.assertEqual(self.map3.name, "MAP3")
        self.assertIs(self.map2.lookup("map3"), self.map3)

    def test_rename_invalid_name(self):
        """Test renaming to an invalid or identical name."""
        with self.assertRaises(InvalidArgumentError):
            self.map3.rename("no spaces")
        with self.assertRaises(InvalidArgumentError):
            self.map3.rename("map3")
        self.assertEqual(self.map3.name, "map3")

    def test_rename_read_only(self):
        """Test renaming a read-only item."""
        with self.assertRaises(ItemNotWritableError):
            self.map4.rename("other")
        self.assertFalse(self.map4.can_accept_new_name("other"))

    def test_rename_in_read_only_parent(self):
        """Test that order is kept when the parent is read-only."""
        locked = Directory("locked")
        first = Directory("b", locked)
        second = Directory("c", locked)
        locked.set_writable(False)

        first.rename("d")
        self.assertEqual(locked.children, (second, first))

    def test_can_accept_new_name(self):
        """Test the rename predicate."""
        self.assertTrue(self.map3.can_accept_new_name("fresh"))
        self.assertFalse(self.map3.can_accept_new_name("BESTAND2"))
        self.assertFalse(self.map3.can_accept_new_name(None))
        self.assertTrue(self.map5.can_accept_new_name("map1"))


class TestMove(ItemTestCase):
    """Test moving items between directories."""

    def test_move_directory(self):
        """Test a plain move."""
        self.map3.move(self.map1)

        self.assertIs(self.map3.parent, self.map1)
        self.assertFalse(self.map2.has_child(self.map3))
        self.assertTrue(self.map1.has_child(self.map3))
        self.assertTrue(self.map1.has_proper_children())
        self.assertIsNotNone(self.map3.modification_time)

    def test_move_root(self):
        """Test moving a root into a directory."""
        self.map5.move(self.map3)
        self.assertIs(self.map5.parent, self.map3)
        self.assertFalse(self.map5.is_root)

    def test_move_file(self):
        """Test moving a file."""
        self.bestand1.move(self.map3)
        self.assertIs(self.bestand1.parent, self.map3)
        self.assertEqual(self.map1.total_disk_usage(), 700)

    def test_move_into_descendant(self):
        """Test that a directory cannot move into its own subtree."""
        with self.assertRaises(InvalidArgumentError):
            self.map1.move(self.map3)
        with self.assertRaises(InvalidArgumentError):
            self.map2.move(self.map2)
        self.assertTrue(self.map1.is_root)

    def test_move_invalid_target(self):
        """Test missing, non-directory and same-parent targets."""
        with self.assertRaises(InvalidArgumentError):
            self.map3.move(None)
        with self.assertRaises(InvalidArgumentError):
            self.map3.move(self.bestand1)
        with self.assertRaises(InvalidArgumentError):
            self.map3.move(self.map2)

    def test_move_name_clash(self):
        """Test moving next to an item with the same name."""
        File(self.map5, "bestand1", FileType.PDF)
        with self.assertRaises(InvalidArgumentError):
            self.bestand1.move(self.map5)
        self.assertIs(self.bestand1.parent, self.map1)

    def test_move_read_only_item(self):
        """Test moving a read-only item."""
        locked = Directory("locked", self.map1, writable=False)
        with self.assertRaises(ItemNotWritableError):
            locked.move(self.map5)
        self.assertIs(locked.parent, self.map1)

    def test_move_into_read_only(self):
        """Test moving into a read-only directory."""
        with self.assertRaises(ItemNotWritableError):
            self.map3.move(self.map4)
        self.assertIs(self.map3.parent, self.map2)

    def test_move_out_of_read_only(self):
        """Test moving out of a read-only directory."""
        locked = Directory("locked")
        inner = Directory("inner", locked)
        locked.set_writable(False)

        with self.assertRaises(InvalidArgumentError):
            inner.move(self.map5)
        self.assertIs(inner.parent, locked)


class TestMakeRoot(ItemTestCase):
    """Test detaching items as roots."""

    def test_make_root(self):
        """Test detaching a subdirectory."""
        self.map2.make_root()

        self.assertTrue(self.map2.is_root)
        self.assertFalse(self.map1.has_child(self.map2))
        self.assertEqual(self.map3.absolute_path(), "/map2/map3")

    def test_make_root_already_root(self):
        """Test that rooting a root does nothing."""
        self.map5.make_root()
        self.map4.make_root()
        self.assertTrue(self.map5.is_root)
        self.assertIsNone(self.map5.modification_time)

    def test_file_cannot_be_root(self):
        """Test that files cannot become roots."""
        with self.assertRaises(ItemCannotBeRootError):
            self.bestand1.make_root()
        self.assertIs(self.bestand1.parent, self.map1)

    def test_make_root_read_only(self):
        """Test rooting with a read-only item or parent."""
        locked = Directory("locked", self.map1, writable=False)
        with self.assertRaises(ItemNotWritableError):
            locked.make_root()

        outer = Directory("outer")
        inner = Directory("inner", outer)
        outer.set_writable(False)
        with self.assertRaises(ItemNotWritableError):
            inner.make_root()
        self.assertIs(inner.parent, outer)


class TestTerminate(ItemTestCase):
    """Test termination and its aftermath."""

    def test_terminate_detaches(self):
        """Test that termination removes the item from its parent."""
        self.map3.terminate()

        self.assertTrue(self.map3.is_terminated)
        self.assertIsNone(self.map3.parent)
        self.assertFalse(self.map2.has_child(self.map3))
        self.assertTrue(self.map3.has_proper_parent_directory())

    def test_terminate_twice(self):
        """Test that terminating again does nothing."""
        self.map5.terminate()
        self.map5.terminate()
        self.assertTrue(self.map5.is_terminated)

    def test_terminated_item_is_frozen(self):
        """Test that mutations fail after termination."""
        self.map3.terminate()

        with self.assertRaises(IllegalItemStateError):
            self.map3.rename("other")
        with self.assertRaises(IllegalItemStateError):
            self.map3.move(self.map5)
        with self.assertRaises(IllegalItemStateError):
            self.map3.make_root()
        with self.assertRaises(IllegalItemStateError):
            self.map3.set_writable(False)
        self.assertFalse(self.map3.can_be_terminated())
        self.assertFalse(self.map3.can_accept_new_name("other"))


class TestHierarchy(ItemTestCase):
    """Test parent relations and paths."""

    def test_parent_of(self):
        """Test direct and indirect ancestry."""
        self.assertTrue(self.map1.is_direct_or_indirect_parent_of(self.map3))
        self.assertTrue(self.map2.is_direct_or_indirect_parent_of(self.bestand2))
        self.assertFalse(self.map3.is_direct_or_indirect_parent_of(self.map1))
        self.assertFalse(self.map1.is_direct_or_indirect_parent_of(self.map1))
        self.assertFalse(self.map1.is_direct_or_indirect_parent_of(None))

    def test_root(self):
        """Test the top-most ancestor."""
        self.assertIs(self.map3.root, self.map1)
        self.assertIs(self.bestand2.root, self.map1)
        self.assertIs(self.map5.root, self.map5)

    def test_absolute_path(self):
        """Test paths of directories and files."""
        self.assertEqual(self.map1.absolute_path(), "/map1")
        self.assertEqual(self.map3.absolute_path(), "/map1/map2/map3")
        self.assertEqual(self.bestand2.absolute_path(), "/map1/map2/bestand2.txt")

    def test_can_have_as_parent_directory(self):
        """Test the prospective parent predicate."""
        self.assertTrue(self.map3.can_have_as_parent_directory(self.map1))
        self.assertTrue(self.map3.can_have_as_parent_directory(None))
        self.assertFalse(self.map3.can_have_as_parent_directory(self.map3))
        self.assertFalse(self.map1.can_have_as_parent_directory(self.map3))
        self.assertFalse(self.map3.can_have_as_parent_directory(self.map4))

        self.map5.terminate()
        self.assertTrue(self.map5.can_have_as_parent_directory(None))
        self.assertFalse(self.map5.can_have_as_parent_directory(self.map1))

    def test_has_proper_parent_directory(self):
        """Test the back-reference invariant on the fixture."""
        for item in (self.map1, self.map2, self.map3, self.map4, self.bestand1, self.bestand2):
            self.assertTrue(item.has_proper_parent_directory())

    def test_to_dict(self):
        """Test the display dictionary."""
        info = self.bestand2.to_dict()

        self.assertEqual(info['name'], "bestand2")
        self.assertEqual(info['kind'], "file")
        self.assertEqual(info['path'], "/map1/map2/bestand2.txt")
        self.assertEqual(info['size'], 600)
        self.assertEqual(info['type'], "txt")
        self.assertIsNone(info['modified'])

        info = self.map1.to_dict()
        self.assertEqual(info['children'], 2)
        self.assertEqual(info['disk_usage'], 700)
        self.assertTrue(info['root'])

    def test_repr(self):
        """Test string forms."""
        self.assertEqual(str(self.map2), "map2")
        self.assertIn("/map1/map2", repr(self.map2))


if __name__ == '__main__':
    unittest.main()
