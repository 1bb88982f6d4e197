from scipy.special import expit


def sigmoid(x):
    """ The logistic function, 1 / (1 + exp(-x)), for scalars or arrays
    """
    return expit(x)


def sigmoid_prime(x):
    """ The derivative of the logistic function, sigmoid(x)*(1-sigmoid(x))

    Note
    ----
    During training this is evaluated at the already activated layer
    values rather than at the pre-activation sums.
    """
    s = sigmoid(x)
    return s * (1.0 - s)
