import logging

import numpy

from ffnet.neural_network.neural_network import (
    DEFAULT_N_INPUT, DEFAULT_N_OUTPUT)


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def make(n_samples, n_input=DEFAULT_N_INPUT, n_output=DEFAULT_N_OUTPUT,
         random_state=None):
    """
    Make a random classification dataset.

    Parameters
    ----------
    n_samples: int
        Number of rows.

    n_input: int, default=4
        Number of input columns. Values are uniform on [0, 1) rounded
        to six decimal places.

    n_output: int, default=3
        Number of classes. Each row's class is drawn uniformly.

    random_state: numpy.random.RandomState, default=None
        RandomState object for reproducible results.

    Returns
    -------
    inputs, labels: ndarray, ndarray
        Shapes (n_samples, n_input) and (n_samples, n_output); `labels`
        is one-hot encoded.
    """
    if n_samples < 0:
        raise ValueError("`n_samples` should be non-negative.")
    if n_input < 1 or n_output < 1:
        raise ValueError("`n_input` and `n_output` should be positive.")

    rs = random_state if random_state is not None else \
        numpy.random.RandomState()

    inputs = numpy.round(rs.uniform(size=(n_samples, n_input)), 6)

    classes = rs.randint(n_output, size=n_samples)
    labels = numpy.zeros((n_samples, n_output))
    labels[numpy.arange(n_samples), classes] = 1.0

    return inputs, labels


def generate_data(filename, n_samples, n_input=DEFAULT_N_INPUT,
                  n_output=DEFAULT_N_OUTPUT, random_state=None):
    """ Write a dataset made by :func:`make` to `filename` as CSV

    Inputs are written with six decimal places and labels as integers,
    which is the format read by :func:`ffnet.data.loader.load`.
    """
    inputs, labels = make(n_samples, n_input=n_input, n_output=n_output,
                          random_state=random_state)

    fmt = ['%.6f'] * n_input + ['%d'] * n_output
    numpy.savetxt(filename, numpy.hstack([inputs, labels]),
                  fmt=fmt, delimiter=',')

    logger.info("Wrote {} rows to {}".format(n_samples, filename))

    return inputs, labels
