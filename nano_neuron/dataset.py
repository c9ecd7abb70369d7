from typing import Tuple

import numpy as np

from nano_neuron.target import celsius_to_fahrenheit


def generate_data_set(start: float, count: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build `count` labeled points with a unit step starting at `start`:
        inputs -> [start, start + 1, start + 2, ...]
        labels -> celsius_to_fahrenheit(inputs)

    In real life this data would be collected rather than generated. We use the
        same law with a different start to get a held-out set that doesn't overlap
        with the training one.
    """
    if count < 0:
        raise ValueError(f"Data set size must be non-negative. Received: {count}")
    inputs = start + np.arange(count, dtype=np.float64)
    labels = celsius_to_fahrenheit(inputs)

    # The data sets are read-only once generated
    inputs.flags.writeable = False
    labels.flags.writeable = False
    return inputs, labels
