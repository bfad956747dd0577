from fleet_collector.config import Settings, get_settings


def test_settings_defaults(monkeypatch):
    for name in (
        "COLLECTOR_HOST",
        "COLLECTOR_PORT",
        "LOG_LEVEL",
        "COLLECTOR_URL",
        "REPORT_INTERVAL_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.collector_host == "0.0.0.0"
    assert settings.collector_port == 8080
    assert settings.log_level == "INFO"
    assert settings.collector_url == "http://127.0.0.1:8080"
    assert settings.report_interval_seconds == 30.0


def test_settings_from_env_parses_values(monkeypatch):
    monkeypatch.setenv("COLLECTOR_HOST", "127.0.0.1")
    monkeypatch.setenv("COLLECTOR_PORT", " 9090 ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("COLLECTOR_URL", "http://collector.local:9090")
    monkeypatch.setenv("REPORT_INTERVAL_SECONDS", "5")

    settings = Settings.from_env()
    assert settings.collector_host == "127.0.0.1"
    assert settings.collector_port == 9090
    assert settings.log_level == "DEBUG"
    assert settings.collector_url == "http://collector.local:9090"
    assert settings.report_interval_seconds == 5.0


def test_empty_env_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("COLLECTOR_PORT", "  ")
    monkeypatch.delenv("COLLECTOR_HOST", raising=False)

    settings = Settings.from_env()
    assert settings.collector_port == 8080
    assert settings.collector_host == "0.0.0.0"


def test_get_settings_is_cached(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("COLLECTOR_URL", "http://example.local")
    s1 = get_settings()
    s2 = get_settings()
    assert s1 is s2
    assert s1.collector_url == "http://example.local"
    get_settings.cache_clear()
