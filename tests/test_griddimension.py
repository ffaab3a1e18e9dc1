import unittest
from copy import deepcopy
from math import prod
from itertools import product

from geogrid import GeoGrid
from geogrid.typing import Dim1, Dim2, Dim3
from utils import backends, index_tensor

class TestGridDimension(unittest.TestCase):

    def setUp(self):
        self.geogrid = [GeoGrid(backend) for backend in backends]
        self.extents = [(8,), (1,), (8, 3), (4, 5), (13, 8, 3), (2, 1, 7)]

    def test_construction(self):
        for gg, extents in product(self.geogrid, self.extents):
            dim = gg.dimension(*extents)
            self.assertEqual(dim.number_of_dimensions(), len(extents))
            self.assertEqual(dim.slice(), extents)
            self.assertEqual(dim, gg.dimension(extents))

        self.assertIsInstance(Dim1(8), Dim1)
        self.assertRaises(ValueError, Dim2, 8)
        self.assertRaises(ValueError, Dim2, 8, 3, 1)
        self.assertRaises(ValueError, Dim3, 1, -1, 2)
        self.assertRaises(TypeError, Dim2, 1.5, 2)
        for gg in self.geogrid:
            self.assertRaises(ValueError, gg.dimension)
            self.assertRaises(ValueError, gg.dimension, 1, 2, 3, 4)

    def test_index(self):
        dim = Dim3(13, 8, 3)
        self.assertEqual(dim[0], 13)
        self.assertEqual(dim[1], 8)
        self.assertEqual(dim[2], 3)
        self.assertEqual(list(dim), [13, 8, 3])

        idx = Dim3(0, 0, 0)
        idx[1] = 5
        self.assertEqual(idx.slice(), (0, 5, 0))

    def test_eq(self):
        self.assertEqual(Dim2(8, 3), Dim2(8, 3))
        self.assertNotEqual(Dim2(8, 3), Dim2(3, 8))
        self.assertNotEqual(Dim1(8), Dim2(8, 1))
        self.assertEqual(hash(Dim2(8, 3)), hash(Dim2(8, 3)))

        dim = Dim2(8, 3)
        copied = deepcopy(dim)
        copied[0] = 1
        self.assertEqual(dim, Dim2(8, 3))

    def test_number_of_elements(self):
        for gg, extents in product(self.geogrid, self.extents):
            self.assertEqual(gg.dimension(extents).number_of_elements(), prod(extents))
        self.assertEqual(Dim1(0).number_of_elements(), 0)
        self.assertEqual(Dim2(0, 5).number_of_elements(), 0)
        self.assertEqual(Dim3(1, 1, 1).number_of_elements(), 1)
        self.assertEqual(Dim3(2, 3, 0).number_of_elements(), 0)
        self.assertEqual(Dim3(13, 8, 3).number_of_elements(), 13 * 8 * 3)

    def test_strides(self):
        self.assertEqual(Dim1(8).strides(), Dim1(1))
        self.assertEqual(Dim2(8, 3).strides(), Dim2(3, 1))
        self.assertEqual(Dim2(8, 3).strides().slice(), (3, 1))
        self.assertEqual(Dim3(13, 8, 3).strides(), Dim3(8 * 3, 3, 1))

        for gg, extents in product(self.geogrid, self.extents):
            strides = gg.dimension(extents).strides()
            self.assertEqual(strides[len(extents)-1], 1)
            for i in range(len(extents)-1):
                self.assertEqual(strides[i], extents[i+1] * strides[i+1])

    def test_stride_offset(self):
        self.assertEqual(Dim1.stride_offset(Dim1(5), Dim1(8).strides()), 5)
        self.assertEqual(Dim2.stride_offset(Dim2(2, 2), Dim2(8, 3).strides()), 8)
        self.assertEqual(Dim3.stride_offset(Dim3(2, 2, 2), Dim3(13, 8, 3).strides()), 2 * 8 * 3 + 2 * 3 + 2)

    def test_stride_offset_injective(self):
        for gg, extents in product(self.geogrid, self.extents):
            dim = gg.dimension(extents)
            strides = dim.strides()
            offsets = set()
            for idx in product(*[range(e) for e in extents]):
                offset = type(dim).stride_offset(type(dim).from_index(idx if len(idx) > 1 else idx[0]), strides)
                self.assertTrue(0 <= offset < dim.number_of_elements())
                offsets.add(offset)
            self.assertEqual(len(offsets), dim.number_of_elements())

    def test_axis_values(self):
        self.assertEqual(Dim1(8).x_axis_value(), 8)
        self.assertEqual(Dim1(8).y_axis_value(), 1)
        self.assertEqual(Dim2(4, 5).x_axis_value(), 5)
        self.assertEqual(Dim2(4, 5).y_axis_value(), 4)
        self.assertEqual(Dim3(13, 8, 3).x_axis_value(), 3)
        self.assertEqual(Dim3(13, 8, 3).y_axis_value(), 8)

    def test_as_pattern(self):
        self.assertEqual(Dim1(8).as_pattern(), 8)
        self.assertEqual(Dim2(4, 5).as_pattern(), (5, 4))
        self.assertEqual(Dim3(13, 8, 3).as_pattern(), (3, 8, 13))

    def test_from_index(self):
        self.assertEqual(Dim1.from_index(5), Dim1(5))
        self.assertEqual(Dim2.from_index((2, 3)), Dim2(2, 3))
        self.assertEqual(Dim2.from_index([2, 3]), Dim2(2, 3))
        self.assertEqual(Dim3.from_index((1, 2, 3)), Dim3(1, 2, 3))
        self.assertEqual(Dim2.from_index(Dim2(2, 3)), Dim2(2, 3))
        self.assertEqual(Dim2.from_index((2, 3)).index_pattern(), (2, 3))
        self.assertEqual(Dim1.from_index(5).index_pattern(), 5)

        self.assertRaises(ValueError, Dim2.from_index, 5)
        self.assertRaises(ValueError, Dim2.from_index, (1, 2, 3))
        self.assertRaises(ValueError, Dim2.from_index, Dim3(1, 2, 3))
        self.assertRaises(TypeError, Dim2.from_index, "ab")
        self.assertRaises(TypeError, Dim1.from_index, 1.0)

    def test_to_offsets(self):
        for gg, extents in product(self.geogrid, self.extents):
            xp = gg.namespace
            dim = gg.dimension(extents)
            idxs = index_tensor(xp, gg.index_type, extents)
            offsets = dim.to_offsets(idxs)
            ref = xp.reshape(xp.arange(dim.number_of_elements(), dtype=gg.index_type), extents)
            self.assertTrue(xp.all(offsets == ref))

            self.assertRaises(ValueError, dim.to_offsets, xp.zeros((len(extents)+1, 2), dtype=gg.index_type))
            self.assertRaises(ValueError, dim.to_offsets, xp.zeros((len(extents), 2)))

    def test_to_indices(self):
        for gg, extents in product(self.geogrid, self.extents):
            xp = gg.namespace
            dim = gg.dimension(extents)
            offsets = xp.reshape(xp.arange(dim.number_of_elements(), dtype=gg.index_type), extents)
            idxs = dim.to_indices(offsets)
            self.assertTrue(xp.all(idxs == index_tensor(xp, gg.index_type, extents)))

if __name__ == '__main__':
    unittest.main()
