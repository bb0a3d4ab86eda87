"""Tests for logging setup and the access log."""

import json
import logging

import pytest

from shortlink.common.logging_config import JsonFormatter, setup_logging


@pytest.fixture
def json_log_file(tmp_path):
    """Configure JSON logging to a file and restore plain logging afterwards."""
    path = tmp_path / "shortlink.log"
    logger = setup_logging(level="DEBUG", log_file=str(path), json_format=True)
    yield logger, path
    for handler in logger.handlers:
        handler.close()
    setup_logging(level="DEBUG")


def read_json_lines(logger, path):
    for handler in logger.handlers:
        handler.flush()
    return [json.loads(line) for line in path.read_text().splitlines()]


class TestJsonLogging:
    """Test JSON log output."""

    def test_lines_are_valid_json(self, json_log_file):
        logger, path = json_log_file
        url = 'https://example.com/a?q="quoted"&p=C:\\path\\file'

        logger.info(f"Created short link: abc1234 -> {url}")
        logger.warning("Rejected create request: empty or invalid url")

        entries = read_json_lines(logger, path)
        assert len(entries) == 2
        assert entries[0]["message"] == f"Created short link: abc1234 -> {url}"
        assert entries[0]["level"] == "INFO"
        assert entries[0]["logger"] == "shortlink"
        assert isinstance(entries[0]["pid"], int)
        assert entries[1]["level"] == "WARNING"

    def test_exception_is_included(self, json_log_file):
        logger, path = json_log_file

        try:
            raise ValueError("boom")
        except ValueError:
            logger.exception("Failed")

        entry = read_json_lines(logger, path)[0]
        assert "ValueError: boom" in entry["exception"]

    def test_request_fields(self):
        record = logging.LogRecord("shortlink.web", logging.INFO, __file__, 1, "done", None, None)
        record.operation = "FetchUrl"
        record.rpc_code = 404

        entry = json.loads(JsonFormatter().format(record))

        assert entry["operation"] == "FetchUrl"
        assert entry["rpc_code"] == 404
        assert "status_code" not in entry


@pytest.mark.asyncio
class TestAccessLog:
    """Test the per-call access log line."""

    async def test_logs_operation_and_code(self, client, caplog):
        caplog.set_level(logging.INFO, logger="shortlink.web")

        await client.post("/rpc/FetchUrl", json={"input": "doesnotexist"})

        records = [r for r in caplog.records if r.name == "shortlink.web"]
        assert records[-1].operation == "FetchUrl"
        assert records[-1].rpc_code == 404
        assert records[-1].status_code == 404
        assert "RPC FetchUrl -> code 404" in records[-1].getMessage()

    async def test_logs_code_for_malformed_body(self, client, caplog):
        caplog.set_level(logging.INFO, logger="shortlink.web")

        await client.post(
            "/rpc/ShortLink",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        records = [r for r in caplog.records if r.name == "shortlink.web" and hasattr(r, "operation")]
        assert records[-1].operation == "ShortLink"
        assert records[-1].rpc_code == 400

    async def test_non_rpc_path(self, client, caplog):
        caplog.set_level(logging.INFO, logger="shortlink.web")

        await client.get("/health")

        records = [r for r in caplog.records if r.name == "shortlink.web" and hasattr(r, "operation")]
        assert records[-1].operation is None
        assert records[-1].rpc_code is None
        assert "GET /health -> 200" in records[-1].getMessage()
