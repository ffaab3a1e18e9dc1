import unittest
from itertools import product

from geogrid import GeoGrid, lin_space_index_unchecked, lin_space_index, in_bounds, as_grid_index
from geogrid.typing import Dim1, Dim2, Dim3
from utils import backends

class TestGridIndex(unittest.TestCase):

    def setUp(self):
        self.geogrid = [GeoGrid(backend) for backend in backends]

    def test_as_grid_index(self):
        self.assertEqual(as_grid_index(5, Dim1(8)), Dim1(5))
        self.assertEqual(as_grid_index((2, 2), Dim2(8, 3)), Dim2(2, 2))
        self.assertEqual(as_grid_index(Dim3(1, 2, 0), Dim3(13, 8, 3)), Dim3(1, 2, 0))

    def test_representations(self):
        dim1 = Dim1(8)
        self.assertEqual(lin_space_index_unchecked(Dim1(5), dim1),
                         lin_space_index_unchecked(5, dim1))
        self.assertEqual(lin_space_index_unchecked(5, dim1), 5)

        dim2 = Dim2(8, 3)
        self.assertEqual(lin_space_index_unchecked(Dim2(2, 2), dim2),
                         lin_space_index_unchecked((2, 2), dim2))
        self.assertEqual(lin_space_index_unchecked((2, 2), dim2), 8)

        dim3 = Dim3(13, 8, 3)
        self.assertEqual(lin_space_index_unchecked(Dim3(2, 2, 2), dim3),
                         lin_space_index_unchecked((2, 2, 2), dim3))
        self.assertEqual(lin_space_index_unchecked((2, 2, 2), dim3), 2 * 8 * 3 + 2 * 3 + 2)

    def test_all_indices(self):
        for extents in [(4, 5), (3, 4, 2)]:
            dim = Dim2(*extents) if len(extents) == 2 else Dim3(*extents)
            for expected, idx in enumerate(product(*[range(e) for e in extents])):
                self.assertEqual(lin_space_index_unchecked(idx, dim), expected)

    def test_wrong_rank(self):
        self.assertRaises(ValueError, lin_space_index_unchecked, (1, 2), Dim1(8))
        self.assertRaises(ValueError, lin_space_index_unchecked, 1, Dim2(8, 3))
        self.assertRaises(TypeError, lin_space_index_unchecked, 1.5, Dim1(8))

    def test_unchecked(self):
        # out of range indices are linearized without complaint
        self.assertEqual(lin_space_index_unchecked((0, 3), Dim2(8, 3)), 3)
        self.assertEqual(lin_space_index_unchecked((8, 0), Dim2(8, 3)), 24)

    def test_checked(self):
        dim = Dim2(8, 3)
        self.assertTrue(in_bounds((7, 2), dim))
        self.assertFalse(in_bounds((0, 3), dim))
        self.assertFalse(in_bounds((8, 0), dim))
        self.assertEqual(lin_space_index((7, 2), dim), 23)
        self.assertRaises(IndexError, lin_space_index, (0, 3), dim)
        self.assertRaises(IndexError, lin_space_index, 8, Dim1(8))

    def test_checked_negative(self):
        dim = Dim2(4, 5)
        self.assertFalse(in_bounds((-1, 0), dim))
        self.assertFalse(in_bounds([0, -1], dim))
        self.assertFalse(in_bounds(-1, Dim1(8)))
        self.assertRaises(IndexError, lin_space_index, (-1, 0), dim)
        self.assertRaises(IndexError, lin_space_index, (0, -1, 2), Dim3(2, 3, 4))
        self.assertRaises(IndexError, lin_space_index, -1, Dim1(8))
        # the unchecked path rejects negative values while normalizing
        with self.assertRaisesRegex(ValueError, "Index values"):
            lin_space_index_unchecked((-1, 0), dim)
        self.assertRaises(ValueError, in_bounds, (1, 2, 3), dim)
        self.assertRaises(TypeError, in_bounds, (1.5, 2), dim)

    def test_arrays(self):
        for gg in self.geogrid:
            xp = gg.namespace
            dim = gg.dimension(8, 3)
            idxs = xp.asarray([[2, 7, 0], [2, 1, 0]], dtype=gg.index_type)
            offsets = lin_space_index_unchecked(idxs, dim)
            self.assertEqual(offsets.shape, (3,))
            self.assertTrue(xp.all(offsets == xp.asarray([8, 22, 0], dtype=gg.index_type)))
            self.assertTrue(in_bounds(idxs, dim))

            outside = xp.asarray([[2, 8], [2, 1]], dtype=gg.index_type)
            self.assertFalse(in_bounds(outside, dim))
            self.assertRaises(IndexError, lin_space_index, outside, dim)
            negative = xp.asarray([[2, -1], [2, 1]], dtype=gg.index_type)
            self.assertFalse(in_bounds(negative, dim))

    def test_facade(self):
        for gg in self.geogrid:
            xp = gg.namespace
            dim = gg.dimension(4, 5)
            idxs = gg.indices(dim)
            self.assertEqual(idxs.shape, (2, 4, 5))
            offsets = gg.offset(idxs, dim, check=True)
            ref = xp.reshape(xp.arange(20, dtype=gg.index_type), (4, 5))
            self.assertTrue(xp.all(offsets == ref))
            self.assertEqual(gg.offset((3, 4), dim), 19)
            self.assertRaises(IndexError, gg.offset, (4, 0), dim, check=True)
            self.assertTrue(gg.in_bounds(idxs, dim))

if __name__ == '__main__':
    unittest.main()
