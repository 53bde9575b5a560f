import pytest

from core.config import DEFAULT_BASE_URL, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "PAGERDUTY_AUTH_TOKEN",
        "PAGERDUTY_BASE_URL",
        "PAGERDUTY_TIMEOUT",
        "PAGERDUTY_FROM_EMAIL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()

    assert settings.auth_token == ""
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 30.0
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PAGERDUTY_AUTH_TOKEN", "tok")
    monkeypatch.setenv("PAGERDUTY_BASE_URL", "https://proxy.internal")
    monkeypatch.setenv("PAGERDUTY_TIMEOUT", "2.5")
    monkeypatch.setenv("PAGERDUTY_FROM_EMAIL", "ops@example.com")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings == Settings(
        auth_token="tok",
        base_url="https://proxy.internal",
        timeout=2.5,
        from_email="ops@example.com",
        log_level="DEBUG",
    )


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("PAGERDUTY_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="PAGERDUTY_TIMEOUT"):
        Settings.from_env()
