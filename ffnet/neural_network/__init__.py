"""
A single hidden layer feedforward neural network for classification.

Input (R^n) => Hidden (R^h) => Output (R^k)

Both layers use sigmoid activations. Training is full-batch
gradient descent with backpropagation of the signed residual
between one-hot labels and network outputs, run for a fixed
number of epochs.
"""
# flake8: noqa

from .activation import sigmoid, sigmoid_prime
from .neural_network import (
    NetworkConfig,
    NetworkState,
    NeuralNetwork,
    UNTRAINED,
)
