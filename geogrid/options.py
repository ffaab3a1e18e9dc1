# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Optional, Self
from enum import Enum
import logging
import threading

from .backend import ArrayNamespace

logger = logging.getLogger(__name__)

class OptionType(Enum):
    INDEXING = 0

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class IndexingOptions(Options):
    """
    Context manager for pixel lookups of rasters. Without bounds checking an out of range
    index yields an offset the data container may or may not reject.
    """

    #: Raise an IndexError for indices outside of the raster dimension.
    bounds_check: bool

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            bounds_check: bool = False):
        self.bounds_check = bounds_check
        super().__init__(namespace, OptionType.INDEXING)

    def __str__(self) -> str:
        return f"IndexingOptions(bounds_check={self.bounds_check})"

_opts: dict[Any, Options] = {}

def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    else:
        raise KeyError("No options set for the current thread.")

def find_options(namespace: Optional[ArrayNamespace], otype: OptionType) -> Optional[Options]:
    """Like get_options, but returns None if nothing is set."""
    return _opts.get((namespace, otype, threading.get_ident()))

def set_options(opts: IndexingOptions) -> None:
    global _opts
    logger.debug("setting %s for thread %d", opts, threading.get_ident())
    _opts[opts.key] = opts

def remove_options(namespace: ArrayNamespace, otype: OptionType) -> None:
    """Drop the options of the current thread, e.g. before a worker thread finishes."""
    global _opts
    logger.debug("removing %s options for thread %d", otype.name, threading.get_ident())
    _opts.pop((namespace, otype, threading.get_ident()), None)
