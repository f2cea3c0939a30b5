import logging

from ppath.core.logger import get_logger, log


def test_log_routes_to_component_logger(caplog):
    with caplog.at_level(logging.DEBUG, logger="ppath"):
        log("DEBUG", "merge", "rename file: a -> b")

    record = caplog.records[-1]
    assert record.name == "ppath.merge"
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "rename file: a -> b"


def test_get_logger_root():
    assert get_logger().name == "ppath"
    assert get_logger("cli").name == "ppath.cli"
