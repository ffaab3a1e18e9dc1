# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, runtime_checkable
from dataclasses import dataclass

@dataclass(frozen=True)
class SpatialBoundingBox2D:
    """Axis aligned footprint, given by the world coordinates (x, y) of two opposite corners."""

    upper_left_coordinate: tuple[float, float] = (0.0, 0.0)
    lower_right_coordinate: tuple[float, float] = (0.0, 0.0)

    def __str__(self) -> str:
        return f"SpatialBoundingBox2D({self.upper_left_coordinate}, {self.lower_right_coordinate})"

@dataclass(frozen=True)
class TimeInterval:
    """Half open time interval [interval_start, interval_end)."""

    interval_start: int = 0
    interval_end: int = 0

    def duration(self) -> int:
        return self.interval_end - self.interval_start

    def contains(self, time: int) -> bool:
        return self.interval_start <= time < self.interval_end

    def __str__(self) -> str:
        return f"TimeInterval({self.interval_start}, {self.interval_end})"

@runtime_checkable
class SpatialBounded(Protocol):

    def spatial_bounds(self) -> SpatialBoundingBox2D: ...

@runtime_checkable
class TemporalBounded(Protocol):

    def temporal_bounds(self) -> TimeInterval: ...
