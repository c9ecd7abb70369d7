################################################
# Gradient descent for the NanoNeuron
################################################

import logging
from typing import Tuple

import numpy as np

from nano_neuron.model import NanoNeuron
from nano_neuron.utils import as_float_vec, check_batch_size

logger = logging.getLogger(__name__)


def prediction_cost(label, prediction):
    # Squaring gets rid of the sign, the /2 cancels the 2 that falls out of
    #   the derivative in backward_propagation. Don't simplify it away.
    return (label - prediction) ** 2 / 2


def forward_propagation(
        model: NanoNeuron,
        inputs,
        labels,
) -> Tuple[np.ndarray, float]:
    """
    Run the model over the whole batch.

    Returns:
        the prediction for every input and the average cost over the batch
    """
    check_batch_size(inputs, labels)
    inputs = as_float_vec(inputs)
    labels = as_float_vec(labels)

    predictions = model.predict(inputs)
    cost = np.mean(prediction_cost(labels, predictions))
    return predictions, float(cost)


def backward_propagation(
        predictions,
        inputs,
        labels,
) -> Tuple[float, float]:
    """
    Average derivative of the cost by 'w' and by 'b' for the current predictions.

    Note:
        These are the NEGATIVE gradients of the cost, so the update step adds them:
            dW = mean((y - y_hat) * x)
            dB = mean(y - y_hat)
    """
    check_batch_size(predictions, inputs, labels)
    residuals = as_float_vec(labels) - as_float_vec(predictions)

    d_w = np.mean(residuals * as_float_vec(inputs))
    d_b = np.mean(residuals)
    return float(d_w), float(d_b)


def train_model(
        model: NanoNeuron,
        epochs: int,
        alpha: float,
        inputs,
        labels,
        log_every: int = 0,
) -> np.ndarray:
    """
    Train `model` in place for exactly `epochs` epochs. There is no early stopping
        and no divergence check: if alpha is too large for the data, the costs blow up
        and that shows up in the returned history.

    Args:
        model: mutated in place, the caller keeps the same instance
        epochs: number of forward/backward/update cycles
        alpha: the learning rate
        inputs: training inputs
        labels: training labels, same length as inputs
        log_every: log the cost every n epochs at DEBUG level. 0 disables it

    Returns:
        the cost history, one entry per epoch. Entry 0 is the cost of the initial model
    """
    cost_history = np.empty(epochs, dtype=np.float64)

    for epoch in range(epochs):
        predictions, cost = forward_propagation(model, inputs, labels)
        cost_history[epoch] = cost

        d_w, d_b = backward_propagation(predictions, inputs, labels)

        ################################################
        # Both params only move once the gradient is fully computed
        ################################################
        model.w += alpha * d_w
        model.b += alpha * d_b

        if log_every and epoch % log_every == 0:
            logger.debug(f"epoch: {epoch} ----> cost: {cost}")

    return cost_history
