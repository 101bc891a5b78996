# wayfinder/log.py
import logging
import sys

LOGGER_NAME = "wayfinder"
_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time, unless a stream was set."""

    def __init__(self, stream=None):
        super().__init__(stream)
        self._follow_stderr = stream is None

    def setStream(self, stream):
        self._follow_stderr = stream is None
        return super().setStream(stream if stream is not None else sys.stderr)

    def emit(self, record):
        if self._follow_stderr:
            self.stream = sys.stderr
        super().emit(record)


def configure_logging(level="WARNING") -> logging.Logger:
    """Attach a single stderr handler to the package logger and set its level.

    Calling this again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    return logger
