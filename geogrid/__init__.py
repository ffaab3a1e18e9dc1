# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .geogrid import GeoGrid
from .griddimension import GridDimension, Dim1, Dim2, Dim3, dim
from .gridindex import as_grid_index, lin_space_index_unchecked, lin_space_index, in_bounds
from .geotransform import GeoTransform
from .bounds import SpatialBoundingBox2D, TimeInterval
from .raster import BaseRaster, SimpleRaster2d, SimpleRaster3d
