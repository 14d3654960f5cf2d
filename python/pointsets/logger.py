import logging

LOGGER_NAME = "pointsets"

logger = logging.getLogger(LOGGER_NAME)

if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def set_debug(enabled: bool) -> None:
    """Switch the package logger between DEBUG and INFO.

    The level is otherwise left to the host application.
    """
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
