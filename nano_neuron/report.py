from typing import List

import numpy as np

from nano_neuron.model import NanoNeuron
from nano_neuron.target import celsius_to_fahrenheit


def training_report(
        model: NanoNeuron,
        cost_history: np.ndarray,
        test_cost: float,
        temp_in_celsius: float,
) -> List[str]:
    """
    The lines printed after training, in order: cost before/after training, the learned
        params, the cost on the held-out set, and a custom prediction next to the correct answer.
    """
    return [
        f"Cost before the training: {cost_history[0]}",
        f"Cost after the training: {cost_history[-1]}",
        f"NanoNeuron parameters: w: {model.w} b: {model.b}",
        f"Cost on new testing data: {test_cost}",
        f"NanoNeuron \"thinks\" that {temp_in_celsius}°C in Fahrenheit is: {model.predict(temp_in_celsius)}",
        f"Correct answer is: {celsius_to_fahrenheit(temp_in_celsius)}",
    ]
