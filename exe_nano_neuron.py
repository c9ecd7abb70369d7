################################################
# Runner for the NanoNeuron: learns the Celsius to Fahrenheit conversion
#   with plain gradient descent, then reports how close it got
################################################

import logging
import sys
from typing import Optional

import numpy as np

from nano_neuron.config import load_config
from nano_neuron.dataset import generate_data_set
from nano_neuron.model import init_model
from nano_neuron.report import training_report
from nano_neuron.train_funcs import forward_propagation, train_model
from nano_neuron.utils import is_diverged

logger = logging.getLogger(__name__)


def main(config_path: Optional[str] = None) -> int:
    if config_path is None and len(sys.argv) > 1:
        config_path = sys.argv[1]
    config = load_config(config_path)

    logging.basicConfig(format="[%(filename)s:%(lineno)s - %(funcName)s] %(message)s",
                        level=getattr(logging, config["logging_level"]))

    logger.debug("ML Params")
    logger.debug(config["ml_params"])
    logger.debug("Inference Params")
    logger.debug(config["inference_params"])
    ml_conf = config["ml_params"]

    rng = np.random.default_rng(ml_conf.seed)
    nano_neuron = init_model(rng)

    x_train, y_train = generate_data_set(ml_conf.train_start, ml_conf.batch_size)
    x_test, y_test = generate_data_set(ml_conf.eval_start, ml_conf.batch_size)

    logger.info(f"Training for {ml_conf.epochs} epochs with alpha: {ml_conf.alpha}")
    training_cost_history = train_model(
        nano_neuron,
        ml_conf.epochs,
        ml_conf.alpha,
        x_train,
        y_train,
        log_every=ml_conf.log_every if config["RUN_IN_DEBUG"] else 0,
    )
    if is_diverged(training_cost_history):
        logger.warning("Training cost did not go down, alpha is probably too large for this data")

    _, test_cost = forward_propagation(nano_neuron, x_test, y_test)

    for line in training_report(
            nano_neuron,
            training_cost_history,
            test_cost,
            config["inference_params"]["temp_in_celsius"],
    ):
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
