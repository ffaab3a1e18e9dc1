from typing import Any
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#backends.append(api.array_namespace(tr.zeros(1)))

def index_tensor(xp: Any, int_type: Any, extents: tuple[int, ...]) -> Any:
    """All indices of a grid with shape (len(extents), *extents)."""
    idxs = xp.zeros((len(extents), *extents), dtype=int_type)
    for i, size in enumerate(extents):
        cut = [1] * len(extents)
        cut[i] = size
        idxs[i,...] += xp.reshape(xp.arange(size, dtype=int_type), tuple(cut))
    return idxs
