import logging

import pytest

from mentionmarkup import apply_change_to_value
from mentionmarkup.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("mentionmarkup")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def test_get_logger_uses_package_hierarchy():
    assert get_logger().name == "mentionmarkup"
    assert get_logger("change").name == "mentionmarkup.change"


def test_configure_logging_resets_handlers():
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert not logger.propagate


def test_configure_logging_writes_reconciler_debug_to_file(tmp_path):
    log_file = tmp_path / "mentions.log"
    logger = configure_logging(verbose=True, log_file=log_file)

    assert len(logger.handlers) == 2

    # Typing a space autocorrects "teh" before the caret
    apply_change_to_value(
        "@[John](u1) teh", "@[__display__](__id__)", "John the ", 8, 8, 9
    )
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "mentionmarkup.change" in content
    assert "Autocorrection detected" in content
