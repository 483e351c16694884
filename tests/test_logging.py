import json
import logging

import pytest

from transcriber_common import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_logs_are_json_with_extra_fields(capsys, restore_logging):
    logger = setup_logging()

    logger.info("Audio downloaded", extra={"video_id": "dQw4w9WgXcQ", "size": 42})

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "Audio downloaded"
    assert record["levelname"] == "INFO"
    assert record["video_id"] == "dQw4w9WgXcQ"
    assert record["size"] == 42


def test_level_from_argument(capsys, restore_logging):
    logger = setup_logging("warning")

    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
    assert logging.getLogger("uvicorn").level == logging.WARNING
