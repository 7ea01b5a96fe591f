import json
import logging

from search_nico.api import decoder
from search_nico.api.decoder import decode_contents_response
from search_nico.core.config import config
from search_nico.core.logger import LogEvent, SearchNicoLogger, _format_duration, logger


def _last_events(n: int) -> list[dict]:
    lines = logger.log_file.read_text(encoding="utf-8").splitlines()
    return [json.loads(line) for line in lines[-n:]]


def test_request_and_response_are_logged_with_duration():
    logger.request("/api/", {"query": "hoge", "size": 5})
    logger.response(200, 5, hits=42)

    request, response = _last_events(2)
    assert request["event_type"] == "REQUEST"
    assert request["data"] == {"path": "/api/", "query": {"query": "hoge", "size": 5}}
    assert response["event_type"] == "RESPONSE"
    assert response["data"]["path"] == "/api/"
    assert response["data"]["hits"] == 42
    assert response["data"]["duration_seconds"] >= 0


def test_response_without_request_is_still_logged():
    logger.response(200, 0)

    (event,) = _last_events(1)
    assert event["data"]["path"] == "?"
    assert "hits" not in event["data"]


def test_log_event_serializes_non_ascii():
    event = LogEvent(event_type="DEBUG", timestamp="t", data={"message": "ゲーム"})
    assert "ゲーム" in event.to_json()


def test_format_duration():
    assert _format_duration(-1) == "0s"
    assert _format_duration(0.25) == "250ms"
    assert _format_duration(2.5) == "2.5s"
    assert _format_duration(61) == "1m 1s"


def _blocked_logger(monkeypatch, tmp_path) -> SearchNicoLogger:
    # A regular file where the logs dir's parent should be
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setattr(config, "logs_dir", blocker / "logs")
    return SearchNicoLogger()


def test_unwritable_logs_dir_disables_file_log_with_one_warning(monkeypatch, tmp_path, caplog):
    blocked = _blocked_logger(monkeypatch, tmp_path)

    with caplog.at_level(logging.WARNING, logger="search_nico"):
        blocked.request("/api/", {"query": "hoge"})
        blocked.response(200, 0)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Event log disabled" in warnings[0].getMessage()
    assert not blocked.log_file.exists()


def test_decode_succeeds_when_logs_dir_cannot_be_created(monkeypatch, tmp_path):
    monkeypatch.setattr(decoder, "logger", _blocked_logger(monkeypatch, tmp_path))

    result = decoder.decode_contents_response('{"type":"stats","values":[{"total":3}]}\n')

    assert (result.status, result.hits) == (200, 3)
    assert decoder.decode_tags_response("").status == 200


def test_decode_is_logged_with_chunk_counts():
    decode_contents_response('{"type":"stats","values":[{"total":1}]}\n{"errid":101}\n')

    (event,) = _last_events(1)
    assert event["event_type"] == "DECODE"
    assert event["data"]["chunks"] == {"StatsChunk": 1, "ErrorChunk": 1}
