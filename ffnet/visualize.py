import matplotlib.pyplot as plt
import numpy


def plot_error_history(nnet, ax=None, **plot_kwargs):
    """ Plot the mean squared residual of each training epoch

    Parameters
    ----------
    nnet: NeuralNetwork
        A trained network.

    ax: matplotlib.axes.Axes, default=None
        The axes to draw on. The default creates a new figure.

    plot_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib.axes.Axes

    Raises
    ------
    ValueError
        If `nnet` was never trained with `train`. A network whose
        parameters were installed with `set_params` has no history.
    """
    if nnet.error_history is None:
        raise ValueError("network has no training history")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    epochs = numpy.arange(1, len(nnet.error_history) + 1)

    ax.plot(epochs, nnet.error_history, **plot_kwargs)
    ax.set_xlabel("Epoch")
    ax.set_ylabel("Mean squared residual")
    ax.set_xlim(1, max(epochs[-1], 2))
    ax.grid(True)

    return ax
