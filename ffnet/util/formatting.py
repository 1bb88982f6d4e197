import numpy

from ffnet.neural_network.neural_network import NetworkState


def format_matrix(name, m, precision=6):
    """ Render `m` after a "name: " label with the continuation rows
    aligned under the first one
    """
    label = "{}: ".format(name)
    body = numpy.array2string(numpy.asarray(m), precision=precision,
                              prefix=label, max_line_width=120)
    return label + body


def format_network(nnet, precision=6):
    """ Render all four fitted parameter matrices of `nnet`, one block
    per matrix separated by blank lines
    """
    state = nnet.get_params()
    return "\n\n".join(
        format_matrix(name, param, precision=precision)
        for name, param in zip(NetworkState._fields, state))
