"""
This is a simple neural network class for classification.

A general number of inputs, hidden units and outputs is
supported, with one-hot encoded labels for the outputs.

Input (R^n) => Hidden (R^h) => Output (R^k)

Both layers compute the sigmoid of an affine map of the
previous layer. Training is full-batch gradient descent on the
signed residual between labels and outputs for a fixed number
of epochs. The biases keep their initial constant value; only
the weights are updated.
"""
from collections import namedtuple
import logging
import numbers

import numpy

from ffnet import matrix
from ffnet.core.exception import DimensionMismatch, UninitializedModel
from ffnet.neural_network.activation import sigmoid, sigmoid_prime


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

DEFAULT_N_INPUT = 4
DEFAULT_N_OUTPUT = 3
DEFAULT_EPOCHS = 100
DEFAULT_LEARNING_RATE = 0.1


_NetworkConfigBase = namedtuple(
    '_NetworkConfigBase',
    ['n_hidden', 'n_input', 'n_output', 'epochs', 'learning_rate'],
    defaults=[DEFAULT_N_INPUT, DEFAULT_N_OUTPUT,
              DEFAULT_EPOCHS, DEFAULT_LEARNING_RATE])


class NetworkConfig(_NetworkConfigBase):
    """ Immutable network structure and training parameters

    n_hidden: int
        Number of hidden nodes.

    n_input: int, default=4
        Number of input nodes (columns of the input matrix).

    n_output: int, default=3
        Number of output nodes (columns of the one-hot label matrix).

    epochs: int, default=100
        Number of full-batch gradient descent iterations to train.

    learning_rate: float, default=0.1
        The gradient descent step size.
    """
    __slots__ = ()

    def validate(self):
        for field in ('n_input', 'n_output', 'n_hidden', 'epochs'):
            value = getattr(self, field)
            if (isinstance(value, bool) or
                    not isinstance(value, numbers.Integral) or value < 1):
                msg = "`{}` ({!r}) should be a positive integer"
                raise ValueError(msg.format(field, value))

        if (isinstance(self.learning_rate, bool) or
                not isinstance(self.learning_rate, numbers.Real) or
                not self.learning_rate > 0):
            msg = "`learning_rate` ({!r}) should be a positive number"
            raise ValueError(msg.format(self.learning_rate))


# The four learned parameter matrices
NetworkState = namedtuple(
    'NetworkState',
    ['hidden_weights', 'hidden_biases', 'output_weights', 'output_biases'])


class _Untrained:
    """ The state of a network before any successful call to `train`
    """
    __slots__ = ()

    def __repr__(self):
        return "UNTRAINED"


UNTRAINED = _Untrained()


def _apply_sigmoid(i, j, v):
    return sigmoid(v)


def _apply_sigmoid_prime(i, j, v):
    return sigmoid_prime(v)


def forward(inputs, state):
    """ Run the forward pass through both layers

    Parameters
    ----------
    inputs: ndarray, shape=(nsamples, n_input)

    state: NetworkState

    Returns
    -------
    hidden_activation, output: ndarray, ndarray
        Shapes (nsamples, n_hidden) and (nsamples, n_output).
    """
    hidden_input = matrix.multiply(inputs, state.hidden_weights)
    hidden_input = matrix.add_row_vector(hidden_input, state.hidden_biases)
    hidden_activation = matrix.apply(_apply_sigmoid, hidden_input)

    output_input = matrix.multiply(hidden_activation, state.output_weights)
    output_input = matrix.add_row_vector(output_input, state.output_biases)
    output = matrix.apply(_apply_sigmoid, output_input)

    return hidden_activation, output


class NeuralNetwork:
    """
    Single hidden layer neural network with sigmoid hidden and
    output units.

    params: hidden_weights[i,j] = weight from input i to hidden unit j.
            hidden_biases[0,j] = bias into hidden unit j.
            output_weights[j,k] = weight from hidden unit j to output k.
            output_biases[0,k] = bias into output unit k.

    For an input matrix X (examples by row), the computation chain is:
    H = sigmoid( dot(X, hidden_weights) + hidden_biases )
    output = sigmoid( dot(H, output_weights) + output_biases )
    """
    def __init__(self, config, random_state=None):
        """
        Parameters
        ----------
        config: NetworkConfig
            Node counts, number of epochs and learning rate.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results. The
            default creates an unseeded one.
        """
        config.validate()
        self.config = config
        self.random_state = (numpy.random.RandomState()
                             if random_state is None else random_state)

        self.state = UNTRAINED
        self.error_history = None

    def __repr__(self):
        return "<NeuralNetwork n_input=%d, n_hidden=%d, n_output=%d>" % (
            self.config.n_input, self.config.n_hidden, self.config.n_output)

    @property
    def is_fitted(self):
        return isinstance(self.state, NetworkState)

    def _validate_inputs(self, inputs):
        inputs = matrix.as_matrix(inputs)

        if inputs.shape[1] != self.config.n_input:
            msg = "`inputs` has {} columns but the network has {} inputs"
            raise DimensionMismatch(
                msg.format(inputs.shape[1], self.config.n_input))

        return inputs

    def _validate_labels(self, inputs, labels):
        labels = matrix.as_matrix(labels)

        if labels.shape[0] != inputs.shape[0]:
            msg = "Mismatch in number of examples: inputs ({}), labels ({})"
            raise DimensionMismatch(
                msg.format(inputs.shape[0], labels.shape[0]))

        if labels.shape[1] != self.config.n_output:
            msg = "`labels` has {} columns but the network has {} outputs"
            raise DimensionMismatch(
                msg.format(labels.shape[1], self.config.n_output))

        return labels

    def initial_params(self, bias):
        """ Weights drawn IID uniform on [0, 1) and biases all
        equal to `bias`
        """
        n_input = self.config.n_input
        n_hidden = self.config.n_hidden
        n_output = self.config.n_output

        return NetworkState(
            hidden_weights=self.random_state.uniform(size=(n_input,
                                                           n_hidden)),
            hidden_biases=numpy.full((1, n_hidden), bias, dtype=float),
            output_weights=self.random_state.uniform(size=(n_hidden,
                                                           n_output)),
            output_biases=numpy.full((1, n_output), bias, dtype=float),
        )

    def get_params(self):
        """
        Returns
        -------
        state: NetworkState
            The fitted (hidden_weights, hidden_biases, output_weights,
            output_biases) matrices.
        """
        if not self.is_fitted:
            raise UninitializedModel("This network has not been trained")
        return self.state

    def set_params(self, hidden_weights, hidden_biases,
                   output_weights, output_biases):
        """
        Set the parameter values to those provided in the arguments.
        """
        n_input = self.config.n_input
        n_hidden = self.config.n_hidden
        n_output = self.config.n_output

        state = NetworkState(
            hidden_weights=matrix.as_matrix(hidden_weights),
            hidden_biases=matrix.as_matrix(hidden_biases),
            output_weights=matrix.as_matrix(output_weights),
            output_biases=matrix.as_matrix(output_biases),
        )

        expected_shapes = NetworkState(
            hidden_weights=(n_input, n_hidden),
            hidden_biases=(1, n_hidden),
            output_weights=(n_hidden, n_output),
            output_biases=(1, n_output),
        )

        for name, param, shape in zip(
                NetworkState._fields, state, expected_shapes):
            if param.shape != shape:
                msg = "`{}` was shape {} but should be {}"
                raise DimensionMismatch(msg.format(name, param.shape, shape))

        self.state = state

    def predict(self, inputs):
        """
        Parameters
        ----------
        inputs: ndarray, shape=(nsamples, n_input)
            Each row of `inputs` is an observation.

        Returns
        -------
        output: ndarray, shape=(nsamples, n_output)
            The per-class scores, each in (0, 1).
        """
        if not self.is_fitted:
            raise UninitializedModel(
                "`predict` requires a trained network; call `train` first")

        inputs = self._validate_inputs(inputs)
        _, output = forward(inputs, self.state)

        return output

    def train(self, inputs, labels, bias):
        """ Initialize the parameters and run `config.epochs` full-batch
        gradient descent steps.

        Parameters
        ----------
        inputs: ndarray, shape=(nsamples, n_input)
            The training inputs -- examples by row.

        labels: ndarray, shape=(nsamples, n_output)
            The one-hot encoded training labels.

        bias: float
            The constant value of every hidden and output bias.

        Note
        ----
        The shapes are validated before anything else happens. On a
        mismatch `DimensionMismatch` is raised and the current state of
        the network, fitted or not, is kept.
        """
        inputs = self._validate_inputs(inputs)
        labels = self._validate_labels(inputs, labels)

        epochs = self.config.epochs
        pstr = "(Epoch = %%0%dd / %d) mean squared residual: %%.7f" % (
            len(str(epochs)), epochs)

        state = self.initial_params(bias)
        error_history = numpy.zeros(epochs)

        msg = "Training %r on %d examples for %d epochs"
        logger.info(msg % (self, inputs.shape[0], epochs))

        for epoch in range(epochs):
            state, network_error = self._propagate(inputs, labels, state)
            error_history[epoch] = (network_error**2).mean()
            logger.debug(pstr % (epoch + 1, error_history[epoch]))

        self.state = state
        self.error_history = error_history

        logger.info("Training finished, mean squared residual: %.7f"
                    % error_history[-1])

    def _propagate(self, inputs, labels, state):
        """ One epoch of forward propagation, backward propagation and
        weight adjustment.

        Returns
        -------
        state, network_error: NetworkState, ndarray
            The adjusted parameters and the signed residual
            `labels - output` of this epoch's forward pass.
        """
        learning_rate = self.config.learning_rate

        hidden_activation, output = forward(inputs, state)

        # Signed residual; not a loss magnitude
        network_error = matrix.subtract(labels, output)

        # The slopes are evaluated at the activated values
        slope_output = matrix.apply(_apply_sigmoid_prime, output)
        slope_hidden = matrix.apply(_apply_sigmoid_prime, hidden_activation)

        output_delta = matrix.elementwise_multiply(network_error,
                                                   slope_output)
        hidden_error = matrix.multiply(
            output_delta, matrix.transpose(state.output_weights))
        hidden_delta = matrix.elementwise_multiply(hidden_error, slope_hidden)

        output_weights_adj = matrix.scale(
            learning_rate,
            matrix.multiply(matrix.transpose(hidden_activation), output_delta))
        hidden_weights_adj = matrix.scale(
            learning_rate,
            matrix.multiply(matrix.transpose(inputs), hidden_delta))

        state = state._replace(
            output_weights=matrix.add(state.output_weights,
                                      output_weights_adj),
            hidden_weights=matrix.add(state.hidden_weights,
                                      hidden_weights_adj),
        )

        return state, network_error
