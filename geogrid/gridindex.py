# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Conversion of grid indices to linear offsets. An index can be given in the natural form of the
grid rank (an integer, a pair or a triple), as a shape typed index or as an integer array of
shape (ndims, ...) holding many indices at once.
"""

from typing import Any, overload
from numbers import Integral

from .backend import ArrayLike, is_array, namespace_of_arrays, device, axis_shape
from .griddimension import GridDimension

type GridIndex[D: GridDimension] = int | tuple[int, ...] | list[int] | D

def as_grid_index[D: GridDimension](index: GridIndex[D], dim: D) -> D:
    """Normalize an index into the shape typed index matching the rank of dim."""
    return type(dim).from_index(index)

@overload
def lin_space_index_unchecked[D: GridDimension](index: GridIndex[D], dim: D) -> int: ...
@overload
def lin_space_index_unchecked[T: ArrayLike](index: T, dim: GridDimension) -> T: ...
# implementation
def lin_space_index_unchecked(index: Any, dim: GridDimension) -> Any:
    """
    Linear offset of an index within a row-major grid of the given dimension. The index is
    not checked against the extents, out of range indices result in meaningless offsets.
    """
    if is_array(index):
        return dim.to_offsets(index)
    idx = as_grid_index(index, dim)
    return type(dim).stride_offset(idx, dim.strides())

def in_bounds(index: Any, dim: GridDimension) -> bool:
    """Check that every axis value of the index is non-negative and smaller than the corresponding extent."""
    if is_array(index):
        xp = namespace_of_arrays(index)
        if index.shape[0] != dim.NDIM:
            raise ValueError(f"Expect a tensor of shape ({dim.NDIM}, ...)")
        extents = xp.asarray(dim.slice(), dtype=index.dtype, device=device(index))
        extents = xp.reshape(extents, axis_shape(index, dim.NDIM))
        return bool(xp.all(xp.logical_and(index >= 0, index < extents)))
    values = _axis_values(index, dim)
    return all(0 <= i < e for i, e in zip(values, dim))

@overload
def lin_space_index[D: GridDimension](index: GridIndex[D], dim: D) -> int: ...
@overload
def lin_space_index[T: ArrayLike](index: T, dim: GridDimension) -> T: ...
# implementation
def lin_space_index(index: Any, dim: GridDimension) -> Any:
    """Same as lin_space_index_unchecked, but raises an IndexError for out of range indices."""
    if not in_bounds(index, dim):
        raise IndexError(f"Index {_describe(index)} is out of bounds for {dim}")
    return lin_space_index_unchecked(index, dim)

def _axis_values(index: Any, dim: GridDimension) -> tuple[int, ...]:
    if isinstance(index, GridDimension):
        return as_grid_index(index, dim).slice()
    values = (index,) if isinstance(index, Integral) else index
    if not isinstance(values, (tuple, list)):
        raise TypeError(f"Unsupported index type {type(index).__name__}")
    if len(values) != dim.NDIM:
        raise ValueError(f"Expected an index with {dim.NDIM} values for {dim}, but got {len(values)}")
    if any(not isinstance(v, Integral) for v in values):
        raise TypeError(f"Index values must be integers, but got {tuple(values)}")
    return tuple(int(v) for v in values)

def _describe(index: Any) -> str:
    if is_array(index):
        return f"array of shape {index.shape}"
    if isinstance(index, GridDimension):
        return str(index.index_pattern())
    return str(index)
