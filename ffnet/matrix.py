""" Dense matrix algebra primitives used by the network engine.

Every matrix is a 2-d float64 `numpy.ndarray`. All functions return new
arrays and never write into their operands.
"""
import numpy

from ffnet.core.exception import DimensionMismatch


def as_matrix(values):
    """ Convert `values` to a 2-d float64 array

    Raises
    ------
    DimensionMismatch
        If `values` is not two dimensional.
    """
    m = numpy.array(values, dtype=numpy.float64)

    if m.ndim != 2:
        msg = "Expected a 2-d matrix but got {} dimension(s)"
        raise DimensionMismatch(msg.format(m.ndim))

    return m


def _check_same_shape(a, b, name):
    if a.shape != b.shape:
        msg = "{}: shape {} does not match shape {}"
        raise DimensionMismatch(msg.format(name, a.shape, b.shape))


def apply(f, m):
    """ Return `n` where `n[i, j] = f(i, j, m[i, j])`

    Parameters
    ----------
    f: callable
        Has signature::

            f(i, j, v)

        It is first called once with `i` and `j` the integer row and
        column index arrays (shape `m.shape`) and `v` a copy of `m`. A
        scalar result is broadcast to `m.shape`. If that call raises a
        TypeError or ValueError, or returns any other shape, `f` is
        evaluated element by element instead, so plain scalar functions
        (e.g., `math.exp` or an `if` on `v`) work too.

    m: ndarray, ndim=2

    Returns
    -------
    n: ndarray, shape=m.shape
    """
    ii, jj = numpy.indices(m.shape)

    try:
        n = numpy.asarray(f(ii, jj, m.copy()), dtype=numpy.float64)
    except (TypeError, ValueError):
        n = None

    if n is not None and n.ndim == 0:
        n = numpy.full(m.shape, n, dtype=numpy.float64)

    if n is None or n.shape != m.shape:
        n = numpy.vectorize(f, otypes=[numpy.float64])(ii, jj, m)

    return n


def multiply(a, b):
    """ The matrix product of `a` and `b`
    """
    if a.shape[1] != b.shape[0]:
        msg = "multiply: inner dimensions differ, {} x {}"
        raise DimensionMismatch(msg.format(a.shape, b.shape))
    return numpy.dot(a, b)


def elementwise_multiply(a, b):
    _check_same_shape(a, b, 'elementwise_multiply')
    return a * b


def add(a, b):
    _check_same_shape(a, b, 'add')
    return a + b


def subtract(a, b):
    _check_same_shape(a, b, 'subtract')
    return a - b


def transpose(a):
    # Copy so the result never aliases `a`
    return a.T.copy()


def scale(k, a):
    return k * a


def add_row_vector(m, row):
    """ Add the single row `row` to every row of `m` (column-aligned)
    """
    if row.shape != (1, m.shape[1]):
        msg = "add_row_vector: row shape {} should be {}"
        raise DimensionMismatch(msg.format(row.shape, (1, m.shape[1])))

    return apply(lambda i, j, v: v + row[0, j], m)


def sum_along_axis(axis, m):
    """ Sum a matrix along one axis while preserving the other dimension

    Parameters
    ----------
    axis: int
        0 sums each column, giving shape (1, cols). 1 sums each row,
        giving shape (rows, 1).

    m: ndarray, ndim=2

    Returns
    -------
    sums: ndarray, ndim=2
    """
    if axis not in (0, 1):
        raise ValueError("invalid axis: must be 0 or 1")
    return m.sum(axis=axis, keepdims=True)
