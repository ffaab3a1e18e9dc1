# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of geogrid."""

from .griddimension import GridDimension, Dim1, Dim2, Dim3, Ix, Ix1, Ix2, Ix3
from .gridindex import GridIndex
from .geotransform import GeoTransform, GdalGeoTransform
from .bounds import SpatialBoundingBox2D, TimeInterval, SpatialBounded, TemporalBounded
from .raster import Raster, BaseRaster, SimpleRaster2d, SimpleRaster3d

from .options import Options, IndexingOptions, OptionType

from .geogrid import GeoGrid
