# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Iterator, Sequence, Self
from dataclasses import dataclass
from math import isfinite, trunc

from .backend import ArrayLike, namespace_of_arrays, get_index_dtype, device

#: Coefficients in the order (origin_x, pixel_width, x_rotation, origin_y, y_rotation, pixel_height).
type GdalGeoTransform = tuple[float, float, float, float, float, float]

@dataclass(frozen=True, init=False)
class GeoTransform:
    """
    Affine transformation between grid indices (row, col) and world coordinates (x, y).
    The coefficients follow the order used by GDAL and most raster formats. The inverse
    mapping is only available for axis aligned grids, i.e. both rotations are zero.
    """

    #-------------------------------------------------------------------------
    #members

    #: x coordinate of the upper left corner of the upper left cell.
    origin_x: float

    #: Cell size along the x axis.
    pixel_width: float

    #: Shear of the x coordinate per row.
    x_rotation: float

    #: y coordinate of the upper left corner of the upper left cell.
    origin_y: float

    #: Shear of the y coordinate per column.
    y_rotation: float

    #: Cell size along the y axis, usually negative for north up rasters.
    pixel_height: float

    #-------------------------------------------------------------------------
    #constructor

    def __init__(
            self,
            origin_x: float = 0.0,
            pixel_width: float = 0.0,
            x_rotation: float = 0.0,
            origin_y: float = 0.0,
            y_rotation: float = 0.0,
            pixel_height: float = 0.0) -> None:
        object.__setattr__(self, "origin_x", float(origin_x))
        object.__setattr__(self, "pixel_width", float(pixel_width))
        object.__setattr__(self, "x_rotation", float(x_rotation))
        object.__setattr__(self, "origin_y", float(origin_y))
        object.__setattr__(self, "y_rotation", float(y_rotation))
        object.__setattr__(self, "pixel_height", float(pixel_height))

    @classmethod
    def from_gdal(cls, coeffs: Sequence[float]) -> Self:
        """Construct from the six element coefficient array."""
        if len(coeffs) != 6:
            raise ValueError(f"A geo transform has 6 coefficients, but got {len(coeffs)}")
        return cls(*coeffs)

    def to_gdal(self) -> GdalGeoTransform:
        return (self.origin_x, self.pixel_width, self.x_rotation,
                self.origin_y, self.y_rotation, self.pixel_height)

    #-------------------------------------------------------------------------
    #methods

    def is_axis_aligned(self) -> bool:
        return self.x_rotation == 0.0 and self.y_rotation == 0.0

    def grid_2d_to_coordinate(self, grid_index: tuple[int, int]) -> tuple[float, float]:
        """Map a grid index (row, col) to the coordinate (x, y) of the upper left corner of the cell."""
        row, col = grid_index
        x = self.origin_x + col * self.pixel_width + row * self.x_rotation
        y = self.origin_y + col * self.y_rotation + row * self.pixel_height
        return (x, y)

    def coordinate_to_grid_2d(self, coordinate: tuple[float, float]) -> tuple[int, int]:
        """
        Map a coordinate (x, y) to the grid index (row, col) of the cell containing it.
        Coordinates left of or above the origin are clamped to zero. NaN or infinite
        coordinates have no cell and raise a ValueError.
        """
        self._check_axis_aligned()
        x, y = coordinate
        if not (isfinite(x) and isfinite(y)):
            raise ValueError(f"Coordinate must be finite, got {(x, y)}")
        col = trunc((x - self.origin_x) / self.pixel_width)
        row = trunc((y - self.origin_y) / self.pixel_height)
        return (max(row, 0), max(col, 0))

    def to_coords[T: ArrayLike](self, idxs: T) -> T:
        """Convert grid indices with shape (2, ...) holding (rows, cols) to coordinates (x, y)."""
        xp = namespace_of_arrays(idxs)
        self._check_input_tensor(idxs, get_index_dtype(xp))
        rows = xp.astype(idxs[0, ...], xp.float64)
        cols = xp.astype(idxs[1, ...], xp.float64)
        coords = xp.zeros(idxs.shape, dtype=xp.float64, device=device(idxs))
        coords[0, ...] = self.origin_x + cols * self.pixel_width + rows * self.x_rotation
        coords[1, ...] = self.origin_y + cols * self.y_rotation + rows * self.pixel_height
        return coords

    def to_idxs[T: ArrayLike](self, coords: T) -> T:
        """Convert coordinates with shape (2, ...) holding (x, y) to grid indices (rows, cols)."""
        self._check_axis_aligned()
        xp = namespace_of_arrays(coords)
        int_type = get_index_dtype(xp)
        if not xp.isdtype(coords.dtype, "real floating"):
            raise ValueError(f"Expected a floating point input tensor, got {coords.dtype}")
        self._check_input_tensor(coords, coords.dtype)
        idxs = xp.zeros(coords.shape, dtype=int_type, device=device(coords))
        for i, (vals, origin, size) in enumerate(((coords[1, ...], self.origin_y, self.pixel_height),
                                                  (coords[0, ...], self.origin_x, self.pixel_width))):
            vals = xp.trunc((vals - origin) / size)
            vals = xp.where(vals < 0, xp.zeros_like(vals), vals)
            idxs[i, ...] = xp.astype(vals, int_type)
        return idxs

    def _check_axis_aligned(self) -> None:
        if not self.is_axis_aligned():
            raise ValueError("Coordinates can only be mapped to grid indices for transforms without rotation, "\
                             f"got x_rotation={self.x_rotation}, y_rotation={self.y_rotation}")

    def _check_input_tensor(self, input_tensor: ArrayLike, num_type: Any) -> None:
        if input_tensor.dtype != num_type:
            raise ValueError(f"Expected input tensor of type {num_type}, "\
                             f"got {input_tensor.dtype}")
        if len(input_tensor.shape) == 0 or input_tensor.shape[0] != 2:
            raise ValueError(f"Expected input shape to be (2, ...), "\
                             f"got {input_tensor.shape}")

    #-------------------------------------------------------------------------
    #some magic

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_gdal())

    def __str__(self) -> str:
        return f"GeoTransform({list(self.to_gdal())})"
