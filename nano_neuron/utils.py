import math
from typing import Sequence

import numpy as np


class BatchSizeError(Exception):
    """ An exception class for mismatched input/label batches """
    pass


def check_batch_size(*batches: Sequence) -> int:
    """
    Every batch passed in must have the same number of points. We refuse to
        truncate or pad, the caller has to hand us matching data.

    Returns:
        the shared batch size N
    """
    sizes = [len(batch) for batch in batches]
    if len(set(sizes)) > 1:
        raise BatchSizeError(f"Expected batches of equal length. Received: {sizes}")
    return sizes[0] if sizes else 0


def as_float_vec(values) -> np.ndarray:
    vec = np.asarray(values, dtype=np.float64)
    if vec.ndim != 1:
        raise BatchSizeError(f"Expected a 1D batch. Received shape: {vec.shape}")
    return vec


def is_diverged(cost_history: np.ndarray) -> bool:
    # The trainer never checks this itself, it's up to the caller
    first, last = float(cost_history[0]), float(cost_history[-1])
    return not math.isfinite(last) or last > first
