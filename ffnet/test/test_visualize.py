import unittest

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np

from ffnet import NetworkConfig, NeuralNetwork
from ffnet.data.synthetic import make
from ffnet.visualize import plot_error_history


class TestPlotErrorHistory(unittest.TestCase):

    def test_plot(self):

        random_state = np.random.RandomState(1234)
        inputs, labels = make(10, random_state=random_state)

        nnet = NeuralNetwork(NetworkConfig(n_hidden=3, epochs=15),
                             random_state=random_state)
        nnet.train(inputs, labels, bias=0.0)

        ax = plot_error_history(nnet)
        line = ax.get_lines()[0]

        self.assertEqual(len(line.get_xdata()), 15)
        self.assertTrue((line.get_ydata() == nnet.error_history).all())

        plt.close(ax.figure)

    def test_untrained(self):

        nnet = NeuralNetwork(NetworkConfig(n_hidden=3))

        with self.assertRaises(ValueError):
            plot_error_history(nnet)

    def test_params_set_without_training(self):

        nnet = NeuralNetwork(NetworkConfig(n_hidden=2))
        nnet.set_params(np.ones((4, 2)), np.zeros((1, 2)),
                        np.ones((2, 3)), np.zeros((1, 3)))

        self.assertTrue(nnet.is_fitted)

        with self.assertRaises(ValueError):
            plot_error_history(nnet)
