import logging

from regexcollection.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespace() -> None:
    assert get_logger().name == ROOT_LOGGER_NAME
    assert get_logger("patterns").name == "regexcollection.patterns"
    assert get_logger("regexcollection.cli").name == "regexcollection.cli"


def test_configure_logging_is_idempotent() -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    before = list(logger.handlers)
    level = logger.level
    try:
        configure_logging(verbose=True)
        configure_logging(verbose=False)
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.level == logging.WARNING
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(level)
