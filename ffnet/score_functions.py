import numpy

from ffnet.core.exception import DimensionMismatch


def accuracy(outputs, labels):
    """ Compute the fraction of rows whose true class scores the row maximum

    The true class of a row is the first column where the one-hot label
    equals 1.0 (column 0 if there is none). A row counts as a hit if the
    output at that column is exactly equal to the largest output in the
    row, so ties with another class at the maximum are also hits.

    Parameters
    ----------
    outputs: ndarray, shape=(nsamples, n_output)
        The per-class scores, e.g., from :code:`NeuralNetwork.predict`.

    labels: ndarray, shape=(nsamples, n_output)
        The one-hot encoded labels.

    Returns
    -------
    accuracy: float
        The number of hits divided by the number of rows.
    """
    outputs = numpy.asarray(outputs, dtype=numpy.float64)
    labels = numpy.asarray(labels, dtype=numpy.float64)

    if outputs.ndim != 2 or outputs.shape != labels.shape:
        msg = "`outputs` shape {} does not match `labels` shape {}"
        raise DimensionMismatch(msg.format(outputs.shape, labels.shape))

    n_rows = outputs.shape[0]

    if n_rows == 0:
        # Nothing to score; report zero rather than dividing by zero
        return 0.0

    # argmax returns the first True, or 0 when no label is 1.0
    true_class = (labels == 1.0).argmax(axis=1)
    true_scores = outputs[numpy.arange(n_rows), true_class]

    hits = (true_scores == outputs.max(axis=1)).sum()

    return float(hits) / n_rows
