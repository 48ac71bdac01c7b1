import json
import logging

import pytest

from inspection_report_builder.utils.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_logging_to_stdout(capsys):
    setup_logging("info", json_format=True)
    get_logger("inspection_report_builder.test").info("hello")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "hello"
    assert record["levelname"] == "INFO"
    assert record["name"] == "inspection_report_builder.test"


def test_plain_logging_replaces_handlers(capsys):
    setup_logging("DEBUG", json_format=False)
    setup_logging("DEBUG", json_format=False)

    assert len(logging.getLogger().handlers) == 1
    get_logger("plain").debug("details")
    assert " - plain - DEBUG - details" in capsys.readouterr().out
