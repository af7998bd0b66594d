import json
import logging
from pathlib import Path

from unitconv.utils.logging import LOGGER_NAME, configure_json_logger, flush_handlers, log_event


def test_structured_logger_emits_jsonl(tmp_path: Path) -> None:
    log_file = tmp_path / "events.jsonl"
    logger = configure_json_logger(log_file)

    trace_id = log_event(logger, "session.start", prompt="> ")
    log_event(logger, "session.end", trace_id=trace_id, requests=2)
    flush_handlers(logger)

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]

    assert len(lines) == 2
    assert all(line["trace_id"] == trace_id for line in lines)
    assert {line["event"] for line in lines} == {"session.start", "session.end"}
    assert lines[0]["prompt"] == "> "
    assert lines[1]["requests"] == 2
    assert lines[0]["logger"] == LOGGER_NAME


def test_logger_without_path_discards_records() -> None:
    logger = configure_json_logger(None)
    assert logger.propagate is False
    assert [type(handler) for handler in logger.handlers] == [logging.NullHandler]


def test_level_filters_events(tmp_path: Path) -> None:
    log_file = tmp_path / "warnings.jsonl"
    logger = configure_json_logger(log_file, level=logging.WARNING)

    log_event(logger, "request.converted")
    log_event(logger, "request.rejected", level=logging.WARNING)
    flush_handlers(logger)

    events = [json.loads(line)["event"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert events == ["request.rejected"]
