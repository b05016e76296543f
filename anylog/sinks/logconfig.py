"""
logconfig.py

Sink adapter that routes facade levels onto a stdlib logging.Logger.
"""

import logging


def _joined(method):
    # facade calls pass loose parts (logger("warn", "disk", "full")), stdlib expects one message
    def emit(*args):
        method(" ".join(str(a) for a in args))

    return emit


class LoggingSink:
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.error = _joined(logger.error)    # ERROR
        self.warn  = _joined(logger.warning)  # WARNING
        self.info  = _joined(logger.info)     # INFO
        self.log   = _joined(logger.info)     # LOG (mapped to INFO)
        self.debug = _joined(logger.debug)    # DEBUG
        # no TRACE in stdlib logging: trace falls back to log


def setup_logger(level=logging.INFO, name: str = "anylog") -> LoggingSink:
    """
    Configures stdlib logging with a simple format and wraps the named logger.

    Parameters:
    - level: Logging level (e.g., logging.DEBUG, logging.INFO)
    - name: Name of the stdlib logger the sink writes to
    """
    logging.basicConfig(
        level=level,
        format='[%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler()]
    )
    return LoggingSink(logging.getLogger(name))
