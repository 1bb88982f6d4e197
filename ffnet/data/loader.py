import logging

import numpy

from ffnet.neural_network.neural_network import (
    DEFAULT_N_INPUT, DEFAULT_N_OUTPUT)


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def load(filename, n_input=DEFAULT_N_INPUT, n_output=DEFAULT_N_OUTPUT,
         delimiter=','):
    """ Load a delimited text file of numeric rows into an input matrix
    and a label matrix

    Parameters
    ----------
    filename: str
        Path to the data file. Each line holds `n_input` input values
        followed by `n_output` one-hot label values.

    n_input: int, default=4
        Number of leading columns that make up the input matrix.

    n_output: int, default=3
        Number of trailing columns that make up the label matrix.

    delimiter: str, default=','
        The field separator.

    Returns
    -------
    inputs, labels: ndarray, ndarray
        Shapes (nrows, n_input) and (nrows, n_output).

    Raises
    ------
    ValueError
        If a field doesn't parse as a float or a row has the wrong number
        of fields.
    """
    n_fields = n_input + n_output

    try:
        data = numpy.loadtxt(filename, delimiter=delimiter,
                             dtype=numpy.float64, ndmin=2)
    except ValueError as e:
        msg = "Could not parse data file {}: {}"
        raise ValueError(msg.format(filename, e)) from e

    if data.size > 0 and data.shape[1] != n_fields:
        msg = "Rows in {} have {} fields but should have {}"
        raise ValueError(msg.format(filename, data.shape[1], n_fields))

    data = data.reshape(-1, n_fields)

    logger.info("Loaded {} rows from {}".format(data.shape[0], filename))

    inputs = data[:, :n_input].copy()
    labels = data[:, n_input:].copy()

    return inputs, labels
