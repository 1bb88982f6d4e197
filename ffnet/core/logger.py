import logging
import os


DEFAULT_LOG_FILENAME = 'ffnet-log.txt'

LINE_FMT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
            "%(levelname)-8s %(message)s")
DATE_FMT = "%Y-%m-%d %H:%M:%S"

# Handlers installed by `setup_logging`
_handlers = []


def setup_logging(filename=None, level=logging.INFO, stdout=True):
    """ Sets up logging formatting, file location, etc

    Parameters
    ----------
    filename: str, default=None
        The log file. The default (None) writes `ffnet-log.txt` in the
        current directory. An existing file is overwritten.

    level: int, default=logging.INFO
        The root logger level. Use `logging.DEBUG` to see the per-epoch
        training residuals.

    stdout: bool, default=True
        If True, log records are also written to the console.

    Returns
    -------
    filename: str
        The path of the log file in use.
    """
    filename = filename or os.path.join(os.path.curdir,
                                        DEFAULT_LOG_FILENAME)

    formatter = logging.Formatter(fmt=LINE_FMT, datefmt=DATE_FMT)

    handlers = []

    fhandler = logging.FileHandler(filename, mode='w')
    fhandler.setFormatter(formatter)
    handlers.append(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        handlers.append(shandler)

    root = logging.getLogger()
    root.setLevel(level)

    # Replace handlers from any previous call so records aren't duplicated
    teardown_logging()

    for handler in handlers:
        root.addHandler(handler)
        _handlers.append(handler)

    return filename


def teardown_logging():
    """ Remove and close the handlers installed by `setup_logging`
    """
    root = logging.getLogger()
    while _handlers:
        handler = _handlers.pop()
        root.removeHandler(handler)
        handler.close()
