"""Batch validation, flattening and reshaping.

The models work on flat 1-D arrays with one entry per scenario.  This
module turns the caller's fields into such arrays and puts the results back
into the caller's shape.  A batch is 0-D (a single scenario), 1-D or 2-D;
array-valued fields must share one shape and scalar fields are broadcast
to it.
"""

from __future__ import annotations

from typing import Iterator, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

MAX_BATCH_NDIM = 2


def flatten_batch(
    **fields: Optional[ArrayLike],
) -> tuple[dict[str, Optional[NDArray]], tuple[int, ...]]:
    """Validate per-scenario fields and flatten them to equal-length 1-D arrays.

    Parameters
    ----------
    **fields : per-scenario values; ``None`` marks an absent optional field.

    Returns
    -------
    flat : mapping of field name to a float64 1-D array (or ``None``).
    shape : common batch shape, ``()`` for a single scenario.

    Raises
    ------
    ValueError
        If two array-valued fields differ in shape, or a field has more
        than ``MAX_BATCH_NDIM`` dimensions.
    """
    arrays: dict[str, Optional[NDArray]] = {}
    shape: tuple[int, ...] = ()
    shape_owner = ""

    for name, value in fields.items():
        if value is None:
            arrays[name] = None
            continue
        arr = np.asarray(value, dtype=np.float64)
        if arr.ndim > MAX_BATCH_NDIM:
            raise ValueError(
                f"'{name}' has {arr.ndim} dimensions; batches must be "
                f"scalar, 1-D or 2-D."
            )
        if arr.ndim > 0:
            if shape_owner and arr.shape != shape:
                raise ValueError(
                    f"'{name}' has shape {arr.shape} but '{shape_owner}' has "
                    f"shape {shape}; all array inputs must share one shape."
                )
            shape, shape_owner = arr.shape, name
        arrays[name] = arr

    n = int(np.prod(shape, dtype=np.int64))
    flat = {
        name: None if arr is None else np.broadcast_to(arr, shape).reshape(n).copy()
        for name, arr in arrays.items()
    }
    return flat, shape


def restore_shape(values: NDArray, shape: tuple[int, ...]) -> NDArray:
    """Reshape a flat result back to the caller's batch shape."""
    return np.asarray(values).reshape(shape)


def iter_chunks(n: int, chunk_size: int) -> Iterator[slice]:
    """Yield contiguous slices covering ``range(n)``.

    A *chunk_size* of zero (or one not smaller than *n*) yields a single
    slice over the whole batch.
    """
    if chunk_size <= 0 or chunk_size >= n:
        yield slice(0, n)
        return
    for start in range(0, n, chunk_size):
        yield slice(start, min(start + chunk_size, n))


def take_chunk(
    flat: dict[str, Optional[NDArray]],
    chunk: slice,
) -> dict[str, Optional[NDArray]]:
    """Slice every present field of a flattened batch."""
    return {name: None if arr is None else arr[chunk] for name, arr in flat.items()}
