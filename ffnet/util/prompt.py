import sys


def _prompt(label, stdin, stdout):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write("{}: ".format(label))
    stdout.flush()

    line = stdin.readline()
    if not line:
        raise EOFError("No input given for {!r}".format(label))

    return line.strip()


def prompt_int(label, stdin=None, stdout=None):
    """ Ask for an integer on `stdout` and read the answer from `stdin`
    """
    answer = _prompt(label, stdin, stdout)
    try:
        return int(answer)
    except ValueError:
        msg = "{} should be an integer, got {!r}"
        raise ValueError(msg.format(label, answer))


def prompt_float(label, stdin=None, stdout=None):
    """ Ask for a float on `stdout` and read the answer from `stdin`
    """
    answer = _prompt(label, stdin, stdout)
    try:
        return float(answer)
    except ValueError:
        msg = "{} should be a number, got {!r}"
        raise ValueError(msg.format(label, answer))


def prompt_hyperparameters(stdin=None, stdout=None):
    """ Interactively ask for the number of hidden nodes and the bias

    Returns
    -------
    n_hidden, bias: int, float
    """
    n_hidden = prompt_int("Number of Hidden Nodes", stdin, stdout)
    bias = prompt_float("Bias", stdin, stdout)
    return n_hidden, bias
