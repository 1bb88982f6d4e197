# flake8: noqa

from ._version import version as __version__

from .core.exception import DimensionMismatch, UninitializedModel
from .neural_network import (
    NetworkConfig,
    NetworkState,
    NeuralNetwork,
    UNTRAINED,
)
from .score_functions import accuracy
