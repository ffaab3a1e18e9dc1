# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, ClassVar, Iterator, Self
from abc import ABC, abstractmethod
from dataclasses import dataclass
from copy import deepcopy
from numbers import Integral

from .backend import ArrayLike, namespace_of_arrays, device, DType
from .backend import get_index_dtype, axis_shape

# Natural index forms for one, two and three dimensional grids.
type Ix = int
type Ix1 = Ix
type Ix2 = tuple[Ix, Ix]
type Ix3 = tuple[Ix, Ix, Ix]

@dataclass(frozen=True, init=False)
class GridDimension(ABC):
    """
    Fixed rank shape of a grid. The extents are stored from the outermost (slowest varying)
    to the innermost (fastest varying) axis, i.e. in row-major order. The same type is used
    as a shape and as an index into a grid of that shape.
    """

    #-------------------------------------------------------------------------
    #members

    #: Number of axes, fixed per subclass.
    NDIM: ClassVar[int]

    _index: list[int]

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, *extents: int) -> None:
        self._check_extents(extents)
        object.__setattr__(self, "_index", [int(e) for e in extents])

    def _check_extents(self, extents: tuple[int, ...]) -> None:
        if len(extents) != self.NDIM:
            raise ValueError(f"{type(self).__name__} expects {self.NDIM} extents, but got {len(extents)}")
        if any(not isinstance(e, Integral) for e in extents):
            raise TypeError(f"Extents must be integers, but got {extents}")
        if any(e < 0 for e in extents):
            raise ValueError(f"Extents must be non-negative, but got {extents}")

    @classmethod
    def from_index(cls, index: "int | tuple[int, ...] | list[int] | GridDimension") -> Self:
        """
        Convert the natural index form of this rank (an integer for one dimension, a pair
        for two and a triple for three dimensions) into the shape typed index.
        """
        if isinstance(index, GridDimension):
            if index.NDIM != cls.NDIM:
                raise ValueError(f"Cannot use a {index.NDIM}d index for a {cls.NDIM}d grid")
            return deepcopy(index) if type(index) is cls else cls(*index.slice())
        if isinstance(index, Integral):
            index = (index,)
        if isinstance(index, (tuple, list)):
            if any(isinstance(i, Integral) and i < 0 for i in index):
                raise ValueError(f"Index values must be non-negative, but got {tuple(index)}")
            return cls(*index)
        raise TypeError(f"Unsupported index type {type(index).__name__}")

    #-------------------------------------------------------------------------
    #rank specific behaviour

    @abstractmethod
    def number_of_elements(self) -> int:
        """Product of all extents."""
    @abstractmethod
    def strides(self) -> Self:
        """Row-major strides, the innermost axis has stride one."""
    @staticmethod
    @abstractmethod
    def stride_offset(index: "GridDimension", strides: "GridDimension") -> int:
        """Linear offset of an index given a stride table."""
    @abstractmethod
    def as_pattern(self) -> Any:
        """Natural external form of the shape, width first."""
    @abstractmethod
    def index_pattern(self) -> Any:
        """Natural external form of the value used as an index, outermost axis first."""
    @abstractmethod
    def x_axis_value(self) -> int:
        """Extent of the fastest varying axis."""
    @abstractmethod
    def y_axis_value(self) -> int:
        """Extent of the second fastest varying axis."""

    #-------------------------------------------------------------------------
    #methods

    def number_of_dimensions(self) -> int:
        return self.NDIM

    def slice(self) -> tuple[int, ...]:
        return tuple(self._index)

    def to_offsets[T: ArrayLike](self, idxs: T) -> T:
        """
        Convert grid indices with shape (ndims, ...) to linear offsets with shape (...).
        """
        xp = namespace_of_arrays(idxs)
        int_type = get_index_dtype(xp)
        self._check_input(int_type, idxs)
        trans = xp.asarray(self.strides().slice(),
                           dtype=int_type,
                           device=device(idxs))
        offsets = idxs * xp.reshape(trans, axis_shape(idxs, self.NDIM))
        return xp.sum(offsets, axis=0)

    def to_indices[T: ArrayLike](self, offsets: T) -> T:
        """
        Convert linear offsets with shape (...) to grid indices with shape (ndims, ...).
        """
        xp = namespace_of_arrays(offsets)
        int_type = get_index_dtype(xp)
        if offsets.dtype != int_type:
            raise ValueError(f"Input should have dtype={int_type}")
        idxs = xp.zeros((self.NDIM, *offsets.shape),
                        dtype=int_type,
                        device=device(offsets))
        offsets = deepcopy(offsets)
        for axis in reversed(range(self.NDIM)):
            idxs[axis, ...] = offsets % self[axis]
            offsets = offsets // self[axis]
        return idxs

    def _check_input(self, index_dtype: DType, inp: ArrayLike) -> None:
        if inp.dtype != index_dtype:
            raise ValueError(f"Input should have dtype={index_dtype}")
        if len(inp.shape) == 0 or inp.shape[0] != self.NDIM:
            raise ValueError(f"Expect a tensor of shape ({self.NDIM}, ...)")

    #-------------------------------------------------------------------------
    #some magic

    def __getitem__(self, axis: int) -> int:
        return self._index[axis]

    def __setitem__(self, axis: int, value: int) -> None:
        self._index[axis] = int(value)

    def __iter__(self) -> Iterator[int]:
        return iter(self._index)

    def __len__(self) -> int:
        return self.NDIM

    def __eq__(self, other: object) -> bool:
        return isinstance(other, type(self))\
               and self._index == other._index

    def __hash__(self) -> int:
        return hash((type(self).__name__, *self._index))

    def __str__(self) -> str:
        return f"{type(self).__name__}({self._index})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(i) for i in self._index)})"


class Dim1(GridDimension):
    """One dimensional grid. There is no row axis, its height is one."""

    NDIM = 1

    def number_of_elements(self) -> int:
        return self[0]

    def strides(self) -> "Dim1":
        return Dim1(1)

    @staticmethod
    def stride_offset(index: GridDimension, strides: GridDimension) -> int:
        return index[0] * strides[0]

    def as_pattern(self) -> Ix1:
        return self[0]

    def index_pattern(self) -> Ix1:
        return self[0]

    def x_axis_value(self) -> int:
        return self[0]

    def y_axis_value(self) -> int:
        return 1


class Dim2(GridDimension):
    """Two dimensional grid with extents (rows, cols)."""

    NDIM = 2

    def number_of_elements(self) -> int:
        return self[0] * self[1]

    def strides(self) -> "Dim2":
        return Dim2(self[1], 1)

    @staticmethod
    def stride_offset(index: GridDimension, strides: GridDimension) -> int:
        return index[0] * strides[0] + index[1] * strides[1]

    def as_pattern(self) -> Ix2:
        return (self[1], self[0])

    def index_pattern(self) -> Ix2:
        return (self[0], self[1])

    def x_axis_value(self) -> int:
        return self[1]

    def y_axis_value(self) -> int:
        return self[0]


class Dim3(GridDimension):
    """Three dimensional grid with extents (layers, rows, cols)."""

    NDIM = 3

    def number_of_elements(self) -> int:
        return self[0] * self[1] * self[2]

    def strides(self) -> "Dim3":
        return Dim3(self[1] * self[2], self[2], 1)

    @staticmethod
    def stride_offset(index: GridDimension, strides: GridDimension) -> int:
        return index[0] * strides[0] + index[1] * strides[1] + index[2] * strides[2]

    def as_pattern(self) -> Ix3:
        return (self[2], self[1], self[0])

    def index_pattern(self) -> Ix3:
        return (self[0], self[1], self[2])

    def x_axis_value(self) -> int:
        return self[2]

    def y_axis_value(self) -> int:
        return self[1]


_dims: dict[int, type[GridDimension]] = {1: Dim1, 2: Dim2, 3: Dim3}

def dim(*extents: int) -> GridDimension:
    """Grid dimension of the rank given by the number of extents."""
    if len(extents) not in _dims:
        raise ValueError(f"Only grids with 1, 2 or 3 axes are supported, but got {len(extents)}")
    return _dims[len(extents)](*extents)
