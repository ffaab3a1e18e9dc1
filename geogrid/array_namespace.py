# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for arrays and namespaces following the array API standard."""

from typing import Any, Protocol, Sequence

Device = Any
DType = Any

class ArrayLike(Protocol):

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...

    def __getitem__(self, key: Any) -> Any: ...
    def __setitem__(self, key: Any, value: Any) -> None: ...

class ArrayNamespace[T: ArrayLike](Protocol):

    float64: DType

    def __array_namespace_info__(self) -> Any: ...

    def asarray(self, obj: Any, /, *, dtype: DType = None, device: Device = None) -> T: ...
    def zeros(self, shape: int | tuple[int, ...], *, dtype: DType = None, device: Device = None) -> T: ...
    def zeros_like(self, x: T, /) -> T: ...
    def full(self, shape: int | tuple[int, ...], fill_value: Any, *, dtype: DType = None, device: Device = None) -> T: ...
    def arange(self, start: int, /, stop: int | None = None, step: int = 1, *, dtype: DType = None) -> T: ...
    def meshgrid(self, *arrays: T, indexing: str = "xy") -> list[T]: ...
    def stack(self, arrays: Sequence[T], /, *, axis: int = 0) -> T: ...
    def reshape(self, x: T, /, shape: tuple[int, ...]) -> T: ...
    def take(self, x: T, indices: T, /, *, axis: int | None = None) -> T: ...
    def astype(self, x: T, dtype: DType, /) -> T: ...
    def isdtype(self, dtype: DType, kind: Any) -> bool: ...
    def sum(self, x: T, /, *, axis: int | None = None) -> T: ...
    def all(self, x: T, /) -> T: ...
    def trunc(self, x: T, /) -> T: ...
    def where(self, condition: T, x1: T, x2: T, /) -> T: ...
    def isnan(self, x: T, /) -> T: ...
    def logical_and(self, x1: T, x2: T, /) -> T: ...
