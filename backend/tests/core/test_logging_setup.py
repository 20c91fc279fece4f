import logging

import pytest

from querystudio.core.logging import HANDLER_NAME, setup_logging


@pytest.fixture()
def root_logger():
    root = logging.getLogger()
    original_level = root.level
    yield root
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(original_level)


def _own_handlers(root):
    return [h for h in root.handlers if h.get_name() == HANDLER_NAME]


def test_setup_logging_sets_level(root_logger):
    setup_logging("debug")

    assert root_logger.level == logging.DEBUG
    assert len(_own_handlers(root_logger)) == 1


def test_setup_logging_is_idempotent(root_logger):
    setup_logging("INFO")
    setup_logging("WARNING")

    assert len(_own_handlers(root_logger)) == 1
    assert root_logger.level == logging.WARNING


def test_setup_logging_rejects_unknown_level(root_logger):
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("LOUD")
