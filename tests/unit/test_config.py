from pathlib import Path

from search_nico.core.config import Config


def test_load_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("SEARCH_NICO_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("SEARCH_NICO_TIMEOUT_MS", "1200")
    monkeypatch.setenv("SEARCH_NICO_ISSUER", "search-nico")
    monkeypatch.setenv("SEARCH_NICO_REASON", "html5jc")
    monkeypatch.setenv("SEARCH_NICO_LOGS_DIR", str(tmp_path))

    cfg = Config.load()

    assert cfg.base_url == "http://localhost:8080"
    assert cfg.default_timeout_ms == 1200
    assert cfg.logs_dir == Path(tmp_path)
    assert cfg.validate() == []


def test_load_defaults(monkeypatch):
    for name in (
        "SEARCH_NICO_BASE_URL",
        "SEARCH_NICO_TIMEOUT_MS",
        "SEARCH_NICO_ISSUER",
        "SEARCH_NICO_REASON",
        "SEARCH_NICO_LOGS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = Config.load()

    assert cfg.base_url == "http://api.search.nicovideo.jp"
    assert cfg.default_timeout_ms == 3000
    assert cfg.logs_dir == cfg.project_root / "logs"
    assert cfg.validate() == [
        "SEARCH_NICO_ISSUER is not set",
        "SEARCH_NICO_REASON is not set",
    ]
