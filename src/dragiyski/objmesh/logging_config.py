import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """Attach handlers to the package logger; the parsers themselves only create loggers.

    Messages go to stderr, and to ``log_file`` when one is given. Existing
    handlers are dropped first so that repeated calls do not duplicate output.
    """
    logger = logging.getLogger('dragiyski.objmesh')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s', datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
