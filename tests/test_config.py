from siphon.config import DEFAULT_UA, Settings


def test_defaults_when_environment_is_empty(monkeypatch):
    for name in ("SIPHON_IXIGUA_COOKIE", "SIPHON_USER_AGENT", "SIPHON_TIMEOUT", "SIPHON_PROXY", "SIPHON_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.ixigua_cookie == ""
    assert s.user_agent == DEFAULT_UA
    assert s.timeout == 10
    assert s.proxy is None
    assert s.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SIPHON_IXIGUA_COOKIE", "ttwid=abc")
    monkeypatch.setenv("SIPHON_TIMEOUT", "30")
    monkeypatch.setenv("SIPHON_PROXY", "http://127.0.0.1:8080")
    monkeypatch.setenv("SIPHON_LOG_LEVEL", "debug")

    s = Settings.from_env()

    assert s.ixigua_cookie == "ttwid=abc"
    assert s.timeout == 30
    assert s.proxy == "http://127.0.0.1:8080"
    assert s.log_level == "DEBUG"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SIPHON_TIMEOUT", "")
    monkeypatch.setenv("SIPHON_LOG_LEVEL", "")
    monkeypatch.setenv("SIPHON_PROXY", "")
    monkeypatch.setenv("SIPHON_IXIGUA_COOKIE", "")

    s = Settings.from_env()

    assert s.timeout == 10
    assert s.log_level == "INFO"
    assert s.proxy is None
    assert s.ixigua_cookie == ""
