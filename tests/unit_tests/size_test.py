import unittest

from lvm2cmd import errors
from lvm2cmd.size import ResourceCapacity, nearest_size_multiple, SECTOR_SIZE


class ResourceCapacityTestCase(unittest.TestCase):

    def test_strict(self):
        self.assertEqual(ResourceCapacity(512), 512)
        self.assertEqual(ResourceCapacity(0), 0)
        self.assertEqual(ResourceCapacity("1073741824"), 1073741824)

        for value in (513, 511, 1, -512, "513", "12 MiB", 1.5, None, True):
            with self.assertRaises(errors.InvalidResourceCapacityError, msg=value):
                ResourceCapacity(value)

        # still a ValueError for callers that do not know this package
        with self.assertRaises(ValueError):
            ResourceCapacity(513)

    def test_error_names_value(self):
        with self.assertRaisesRegex(errors.InvalidResourceCapacityError, "513"):
            ResourceCapacity(513)

    def test_from_nearest(self):
        self.assertEqual(ResourceCapacity.from_nearest(0), 0)
        self.assertEqual(ResourceCapacity.from_nearest(1), 512)
        self.assertEqual(ResourceCapacity.from_nearest(512), 512)
        self.assertEqual(ResourceCapacity.from_nearest(513), 1024)
        self.assertEqual(ResourceCapacity.from_nearest("1000"), 1024)
        self.assertIsInstance(ResourceCapacity.from_nearest(3), ResourceCapacity)

        with self.assertRaises(errors.InvalidResourceCapacityError):
            ResourceCapacity.from_nearest(-1)

    def test_round_up_properties(self):
        for value in list(range(0, 2049, 7)) + [10 ** 12 + 1, 2 ** 40 - 1]:
            rounded = nearest_size_multiple(value)
            self.assertEqual(rounded % SECTOR_SIZE, 0, msg=value)
            self.assertGreaterEqual(rounded, value, msg=value)
            self.assertLess(rounded - value, SECTOR_SIZE, msg=value)
            self.assertEqual(nearest_size_multiple(rounded), rounded, msg=value)

            # strict construction succeeds exactly for multiples
            if value % SECTOR_SIZE == 0:
                self.assertEqual(ResourceCapacity(value), value)
            else:
                self.assertRaises(errors.InvalidResourceCapacityError, ResourceCapacity, value)

    def test_comparison(self):
        self.assertEqual(ResourceCapacity(1024), ResourceCapacity.from_nearest(1000))
        self.assertLess(ResourceCapacity(512), ResourceCapacity(1024))
        self.assertEqual(hash(ResourceCapacity(512)), hash(512))
        self.assertEqual(sorted([ResourceCapacity(1024), ResourceCapacity(512)]), [512, 1024])

    def test_formatting(self):
        size = ResourceCapacity(4096)
        self.assertEqual(str(size), "4096")
        self.assertEqual(repr(size), "ResourceCapacity(4096)")
        self.assertEqual(size.to_arg(), "4096B")
        self.assertEqual(size.sectors, 8)
