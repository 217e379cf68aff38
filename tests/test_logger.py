import os
import subprocess
import sys
from pathlib import Path

from loguru import logger

from mattylol.utils import get_logger, log_upstream


def _capture():
    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    return records, sink_id


def test_get_logger_binds_name():
    records, sink_id = _capture()
    try:
        get_logger("route.github").info("hello")
    finally:
        logger.remove(sink_id)

    assert records[-1]["extra"]["name"] == "route.github"
    assert records[-1]["message"] == "hello"


def test_log_upstream_is_tagged():
    records, sink_id = _capture()
    try:
        log_upstream("reddit", "https://www.reddit.com/user/x/submitted.rss", "200")
    finally:
        logger.remove(sink_id)

    record = records[-1]
    assert record["extra"]["upstream"] is True
    assert record["message"] == "reddit GET https://www.reddit.com/user/x/submitted.rss -> 200"


def test_lowercase_log_level_still_imports():
    root = Path(__file__).resolve().parents[1]
    env = {**os.environ, "LOG_LEVEL": "debug", "PYTHONPATH": str(root)}
    result = subprocess.run(
        [sys.executable, "-c", "import mattylol.sources"],
        cwd=root,
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
