import importlib
import logging

import pointsets.logger
from pointsets.logger import LOGGER_NAME, set_debug


def test_set_debug_toggles_level():
    log = logging.getLogger(LOGGER_NAME)
    before = log.level
    try:
        set_debug(True)
        assert log.level == logging.DEBUG
        set_debug(False)
        assert log.level == logging.INFO
    finally:
        log.setLevel(before)


def test_import_keeps_host_level_and_single_handler():
    log = logging.getLogger(LOGGER_NAME)
    before = log.level
    handlers = list(log.handlers)
    try:
        log.setLevel(logging.WARNING)
        importlib.reload(pointsets.logger)

        assert log.level == logging.WARNING
        assert log.handlers == handlers
    finally:
        log.setLevel(before)
