# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Sequence, overload
from dataclasses import dataclass
from numbers import Integral
import logging

from .backend import ArrayNamespace, get_index_dtype, get_namespace
from .bounds import SpatialBoundingBox2D, TimeInterval
from .geotransform import GeoTransform
from .griddimension import GridDimension, dim as _dim
from .gridindex import GridIndex, lin_space_index_unchecked, lin_space_index, in_bounds
from .raster import BaseRaster
from .options import IndexingOptions, OptionType, Options, set_options, get_options, remove_options

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class GeoGrid[NDArray: Any]:
    """
    Entry point of geogrid. All arrays created or expected by the methods belong to the array
    namespace the instance was created with.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    #: Internally used index type.
    index_type: Any

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        object.__setattr__(self, "index_type", get_index_dtype(self.namespace))
        logger.debug("using namespace %s with index type %s", self.namespace.__name__, self.index_type)

        set_options(self.indexing())

    #-------------------------------------------------------------------------------------------------
    # base wrapper

    @overload
    def dimension(self, *extents: int) -> GridDimension: ...
    @overload
    def dimension(self, extents: Sequence[int], /) -> GridDimension: ...
    # implementation
    def dimension(self, *extents: Any) -> GridDimension:
        """
        Grid dimension with one to three axes. The extents are given from the outermost to the
        innermost axis, e.g. (rows, cols) for two dimensional grids.
        """
        if len(extents) == 1 and not isinstance(extents[0], Integral):
            extents = tuple(extents[0])
        return _dim(*extents)

    @overload
    def geo_transform(self, coeffs: Sequence[float], /) -> GeoTransform: ...
    @overload
    def geo_transform(
            self,
            origin_x: float,
            pixel_width: float,
            x_rotation: float,
            origin_y: float,
            y_rotation: float,
            pixel_height: float, /) -> GeoTransform: ...
    # implementation
    def geo_transform(self, *coeffs: Any) -> GeoTransform:
        """
        Affine geo transform, either from the six coefficients or from a coefficient array in the
        order (origin_x, pixel_width, x_rotation, origin_y, y_rotation, pixel_height).
        """
        if len(coeffs) == 1:
            return GeoTransform.from_gdal(coeffs[0])
        return GeoTransform.from_gdal(coeffs)

    def time_interval(self, start: int, end: int) -> TimeInterval:
        """
        Half open time interval.
        """
        return TimeInterval(start, end)

    def bounding_box(
            self,
            upper_left: tuple[float, float],
            lower_right: tuple[float, float]) -> SpatialBoundingBox2D:
        """
        Two dimensional bounding box in world coordinates.
        """
        return SpatialBoundingBox2D(upper_left, lower_right)

    #-------------------------------------------------------------------------------------------------
    # raster wrapper

    def raster[D: GridDimension, T, C](
            self,
            dim: D,
            data: C,
            *,
            no_data_value: Optional[T] = None,
            geo_transform: Optional[GeoTransform] = None,
            temporal_bounds: Optional[TimeInterval] = None) -> BaseRaster[D, T, C]:
        """
        Raster over the given dimension. The data is read by linear offsets in row-major order.
        """
        return BaseRaster(dim, data, no_data_value, temporal_bounds, geo_transform,
                          namespace=self.namespace)

    def full[D: GridDimension](
            self,
            dim: D,
            value: Any,
            *,
            no_data_value: Optional[Any] = None,
            geo_transform: Optional[GeoTransform] = None,
            temporal_bounds: Optional[TimeInterval] = None) -> BaseRaster[D, Any, NDArray]:
        """
        Raster where all cells are set to the given value.
        """
        data = self.namespace.full((dim.number_of_elements(),), value)
        return self.raster(dim, data,
                           no_data_value=no_data_value,
                           geo_transform=geo_transform,
                           temporal_bounds=temporal_bounds)

    #-------------------------------------------------------------------------------------------------
    # index wrapper

    def indices(self, dim: GridDimension) -> NDArray:
        """
        All valid indices of a dimension as an array of shape (ndims, *extents).
        """
        xp = self.namespace
        axes = [xp.arange(extent, dtype=self.index_type) for extent in dim]
        return xp.stack(xp.meshgrid(*axes, indexing="ij"), axis=0)

    def offset(self, index: "GridIndex | NDArray", dim: GridDimension, *, check: bool = False) -> Any:
        """
        Linear offset of one or many indices. With check=True out of range indices raise an IndexError.
        """
        if check:
            return lin_space_index(index, dim)
        return lin_space_index_unchecked(index, dim)

    def in_bounds(self, index: "GridIndex | NDArray", dim: GridDimension) -> bool:
        """
        True if all indices lie within the extents of the dimension.
        """
        return in_bounds(index, dim)

    #-------------------------------------------------------------------------------------------------
    # options

    def indexing(self, *, bounds_check: bool = False) -> IndexingOptions:
        """
        Manager for pixel lookups of rasters created by this instance.
        """
        return IndexingOptions(namespace=self.namespace, bounds_check=bounds_check)

    def set_options(self, options: IndexingOptions) -> None:
        """
        Set options globally. The options are stored per thread and are used by the pixel lookups.
        """
        set_options(options)

    def get_options(self, otype: OptionType) -> Options:
        """
        Get the current options.
        """
        return get_options(self.namespace, otype)

    def remove_options(self, otype: OptionType) -> None:
        """
        Remove the options of the current thread. Entries of finished threads are otherwise kept.
        """
        remove_options(self.namespace, otype)
