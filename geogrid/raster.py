# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Sequence, overload
from abc import ABC, abstractmethod
from collections.abc import Sized
from dataclasses import dataclass
import logging

from .backend import ArrayLike, ArrayNamespace, is_array, namespace_of_arrays, size
from .bounds import SpatialBoundingBox2D, TimeInterval
from .geotransform import GeoTransform
from .griddimension import GridDimension, Dim2, Dim3
from .gridindex import GridIndex, lin_space_index, lin_space_index_unchecked
from .options import IndexingOptions, OptionType, find_options

logger = logging.getLogger(__name__)

class Raster[D: GridDimension, T, C](ABC):
    """
    Gridded data referenced in space by a geo transform and in time by an interval.
    """

    @property
    @abstractmethod
    def dimension(self) -> D: ...
    @property
    @abstractmethod
    def no_data_value(self) -> Optional[T]: ...
    @property
    @abstractmethod
    def data_container(self) -> C: ...
    @property
    @abstractmethod
    def geo_transform(self) -> GeoTransform: ...

    @abstractmethod
    def spatial_bounds(self) -> SpatialBoundingBox2D: ...
    @abstractmethod
    def temporal_bounds(self) -> TimeInterval: ...

@dataclass(frozen=True, init=False, eq=False)
class BaseRaster[D: GridDimension, T, C](Raster[D, T, C]):
    """
    Raster backed by a container that is read by linear offsets in row-major order, e.g. a list
    or a one dimensional array. Values equal to the no data value are returned as they are.
    """

    #-------------------------------------------------------------------------
    #members & properties

    _grid_dimension: D
    _data_container: C
    _no_data_value: Optional[T]
    _geo_transform: GeoTransform
    _temporal_bounds: TimeInterval
    _namespace: Optional[ArrayNamespace]

    @property
    def dimension(self) -> D:
        return self._grid_dimension

    @property
    def no_data_value(self) -> Optional[T]:
        return self._no_data_value

    @property
    def data_container(self) -> C:
        return self._data_container

    @property
    def geo_transform(self) -> GeoTransform:
        return self._geo_transform

    #-------------------------------------------------------------------------
    #constructor

    def __init__(
            self,
            grid_dimension: D,
            data_container: C,
            no_data_value: Optional[T] = None,
            temporal_bounds: Optional[TimeInterval] = None,
            geo_transform: Optional[GeoTransform] = None, *,
            namespace: Optional[ArrayNamespace] = None) -> None:
        if namespace is None and is_array(data_container):
            namespace = namespace_of_arrays(data_container)
        self._check_container(grid_dimension, data_container)
        object.__setattr__(self, "_grid_dimension", grid_dimension)
        object.__setattr__(self, "_data_container", data_container)
        object.__setattr__(self, "_no_data_value", no_data_value)
        object.__setattr__(self, "_temporal_bounds", TimeInterval() if temporal_bounds is None else temporal_bounds)
        object.__setattr__(self, "_geo_transform", GeoTransform() if geo_transform is None else geo_transform)
        object.__setattr__(self, "_namespace", namespace)
        logger.debug("created %s with %s and %s", type(self).__name__, grid_dimension, self._geo_transform)

    def _check_container(self, dim: GridDimension, container: Any) -> None:
        if is_array(container):
            if len(container.shape) != 1:
                raise ValueError(f"Expected a one dimensional data container, got shape {container.shape}")
            length = size(container)
        elif isinstance(container, Sized):
            length = len(container)
        else:
            return
        if length < dim.number_of_elements():
            raise ValueError(f"Data container holds {length} values, but {dim} needs {dim.number_of_elements()}")

    #-------------------------------------------------------------------------
    #bounds

    def spatial_bounds(self) -> SpatialBoundingBox2D:
        """Footprint of the raster, from the upper left corner of the first cell to the lower right corner of the last."""
        upper_left = self._geo_transform.grid_2d_to_coordinate((0, 0))
        lower_right = self._geo_transform.grid_2d_to_coordinate((
            self._grid_dimension.y_axis_value(),
            self._grid_dimension.x_axis_value()))
        return SpatialBoundingBox2D(upper_left, lower_right)

    def temporal_bounds(self) -> TimeInterval:
        return self._temporal_bounds

    #-------------------------------------------------------------------------
    #pixel access

    @overload
    def pixel_value_grid(self, grid_index: GridIndex[D]) -> T: ...
    @overload
    def pixel_value_grid[A: ArrayLike](self, grid_index: A) -> A: ...
    # implementation
    def pixel_value_grid(self, grid_index: Any) -> Any:
        """
        Value at a grid index. Integer arrays of shape (ndims, ...) return the values of all
        contained indices with shape (...).
        """
        if self._bounds_check():
            offset = lin_space_index(grid_index, self._grid_dimension)
        else:
            offset = lin_space_index_unchecked(grid_index, self._grid_dimension)
        if is_array(offset):
            return self._take(offset)
        return self._data_container[offset] # type: ignore

    def pixel_value_coord(self, coordinate: tuple[float, float]) -> T:
        """Value of the cell containing a world coordinate (x, y). Only for two dimensional rasters."""
        if self._grid_dimension.NDIM != 2:
            raise ValueError(f"Coordinate lookup needs a two dimensional raster, got {self._grid_dimension}")
        return self.pixel_value_grid(self._geo_transform.coordinate_to_grid_2d(coordinate))

    def is_no_data(self, value: Any) -> Any:
        """Compare a value against the no data value. NaN no data values match NaN values."""
        if self._no_data_value is None:
            return False
        no_data: Any = self._no_data_value
        nan_sentinel = bool(no_data != no_data)
        if is_array(value):
            xp = namespace_of_arrays(value)
            if nan_sentinel:
                return xp.isnan(value)
            return value == no_data
        if nan_sentinel:
            return bool(value != value)
        return bool(value == no_data)

    def _take(self, offsets: Any) -> Any:
        xp = self._namespace or namespace_of_arrays(offsets)
        data = self._data_container if is_array(self._data_container) else xp.asarray(self._data_container)
        values = xp.take(data, xp.reshape(offsets, (-1,)))
        return xp.reshape(values, offsets.shape)

    def _bounds_check(self) -> bool:
        opts = find_options(self._namespace, OptionType.INDEXING)
        return isinstance(opts, IndexingOptions) and opts.bounds_check

    def __str__(self) -> str:
        return f"{type(self).__name__}({self._grid_dimension}, no_data={self._no_data_value}, "\
               f"{self._geo_transform}, {self._temporal_bounds})"

class SimpleRaster2d[T, C](BaseRaster[Dim2, T, C]):
    """Two dimensional raster with extents (rows, cols)."""

    def __init__(
            self,
            extents: Dim2 | tuple[int, int] | Sequence[int],
            data_container: C,
            no_data_value: Optional[T] = None,
            temporal_bounds: Optional[TimeInterval] = None,
            geo_transform: Optional[GeoTransform] = None, *,
            namespace: Optional[ArrayNamespace] = None) -> None:
        super().__init__(Dim2.from_index(extents), data_container, no_data_value, # type: ignore
                         temporal_bounds, geo_transform, namespace=namespace)

class SimpleRaster3d[T, C](BaseRaster[Dim3, T, C]):
    """Three dimensional raster with extents (layers, rows, cols)."""

    def __init__(
            self,
            extents: Dim3 | tuple[int, int, int] | Sequence[int],
            data_container: C,
            no_data_value: Optional[T] = None,
            temporal_bounds: Optional[TimeInterval] = None,
            geo_transform: Optional[GeoTransform] = None, *,
            namespace: Optional[ArrayNamespace] = None) -> None:
        super().__init__(Dim3.from_index(extents), data_container, no_data_value, # type: ignore
                         temporal_bounds, geo_transform, namespace=namespace)
