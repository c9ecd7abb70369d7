import unittest

import numpy as np

from nano_neuron.dataset import generate_data_set
from nano_neuron.model import NanoNeuron, init_model
from nano_neuron.train_funcs import backward_propagation, forward_propagation, prediction_cost, train_model
from nano_neuron.utils import BatchSizeError, is_diverged


class TestCost(unittest.TestCase):
    def test_cost_is_halved_square(self):
        self.assertEqual(prediction_cost(32.0, 0.0), 512.0)
        self.assertEqual(prediction_cost(0.0, 32.0), 512.0)
        self.assertEqual(prediction_cost(5.5, 5.5), 0.0)


class TestForwardBackward(unittest.TestCase):
    def test_true_params_give_zero_cost_and_gradient(self):
        inputs, labels = generate_data_set(0.0, 100)
        model = NanoNeuron(1.8, 32.0)

        predictions, cost = forward_propagation(model, inputs, labels)
        self.assertEqual(cost, 0.0)
        np.testing.assert_array_equal(predictions, labels)

        d_w, d_b = backward_propagation(predictions, inputs, labels)
        self.assertEqual((d_w, d_b), (0.0, 0.0))

    def test_single_point_scenario(self):
        model = NanoNeuron(0.0, 0.0)
        inputs, labels = [0.0], [32.0]

        predictions, cost = forward_propagation(model, inputs, labels)
        self.assertEqual(predictions.tolist(), [0.0])
        self.assertEqual(cost, 512.0)

        d_w, d_b = backward_propagation(predictions, inputs, labels)
        self.assertEqual(d_w, 0.0)
        self.assertEqual(d_b, 32.0)

        cost_history = train_model(model, 1, 0.0005, inputs, labels)
        self.assertEqual(cost_history.tolist(), [512.0])
        self.assertEqual(model.w, 0.0)
        self.assertEqual(model.b, 0.016)

    def test_mismatched_batches_raise(self):
        model = NanoNeuron(1.0, 1.0)
        with self.assertRaises(BatchSizeError):
            forward_propagation(model, [1.0, 2.0, 3.0], [1.0, 2.0])
        with self.assertRaises(BatchSizeError):
            backward_propagation([1.0, 2.0], [1.0, 2.0], [1.0])
        with self.assertRaises(BatchSizeError):
            train_model(model, 5, 0.0005, [1.0], [1.0, 2.0])

    def test_forward_does_not_touch_model(self):
        model = NanoNeuron(0.25, 0.75)
        inputs, labels = generate_data_set(0.0, 10)
        forward_propagation(model, inputs, labels)
        self.assertEqual((model.w, model.b), (0.25, 0.75))


class TestTrainModel(unittest.TestCase):
    def test_history_length_and_first_entry(self):
        inputs, labels = generate_data_set(0.0, 100)
        model = NanoNeuron(0.5, 0.5)
        _, initial_cost = forward_propagation(NanoNeuron(0.5, 0.5), inputs, labels)

        cost_history = train_model(model, 25, 0.0005, inputs, labels)
        self.assertEqual(len(cost_history), 25)
        self.assertEqual(cost_history[0], initial_cost)

    def test_zero_epochs_leaves_model_alone(self):
        inputs, labels = generate_data_set(0.0, 100)
        model = NanoNeuron(0.5, 0.5)
        cost_history = train_model(model, 0, 0.0005, inputs, labels)
        self.assertEqual(len(cost_history), 0)
        self.assertEqual((model.w, model.b), (0.5, 0.5))

    def test_converges_and_recovers_params(self):
        x_train, y_train = generate_data_set(0.0, 100)
        x_test, y_test = generate_data_set(0.5, 100)

        for seed in (0, 42):
            with self.subTest(seed=seed):
                model = init_model(np.random.default_rng(seed))
                cost_history = train_model(model, 70000, 0.0005, x_train, y_train)

                self.assertGreater(cost_history[0], 1000)
                self.assertLess(cost_history[-1], 1e-4)
                self.assertLess(abs(model.w - 1.8), 0.01)
                self.assertLess(abs(model.b - 32), 0.1)
                self.assertFalse(is_diverged(cost_history))

                _, test_cost = forward_propagation(model, x_test, y_test)
                self.assertLess(test_cost, 1e-4)

    def test_large_alpha_diverges(self):
        inputs, labels = generate_data_set(0.0, 100)
        model = NanoNeuron(0.5, 0.5)
        with np.errstate(over="ignore", invalid="ignore"):
            cost_history = train_model(model, 200, 0.01, inputs, labels)
        self.assertEqual(len(cost_history), 200)
        self.assertTrue(is_diverged(cost_history))


if __name__ == "__main__":
    unittest.main()
