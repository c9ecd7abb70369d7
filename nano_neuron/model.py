import logging

import numpy as np

logger = logging.getLogger(__name__)


class NanoNeuron(object):
    """The linear model y = w * x + b. These two parameters are the only
    thing the trainer learns"""

    def __init__(self, w: float, b: float):
        self.w = w
        self.b = b

    def predict(self, x):
        # Works for a scalar as well as elementwise on an np.ndarray
        return x * self.w + self.b

    def __repr__(self):
        return f"NanoNeuron(w={self.w}, b={self.b})"


def init_model(rng: np.random.Generator) -> NanoNeuron:
    """
    Args:
        rng: the random source. Passed in so that a fixed seed gives a reproducible run

    Returns:
        a model with w and b drawn uniformly from [0, 1)
    """
    w = float(rng.random())
    b = float(rng.random())
    logger.debug(f"Initial params w: {w} b: {b}")
    return NanoNeuron(w, b)
