from labor_hours import monitoring
from labor_hours.config import AppSettings


def test_monitoring_disabled_without_dsn(monkeypatch):
    calls = []
    monkeypatch.setattr(monitoring.sentry_sdk, "init", lambda **kwargs: calls.append(kwargs))

    assert monitoring.configure_error_monitoring(AppSettings(sentry_dsn=None)) is False
    assert calls == []


def test_monitoring_initializes_sentry_with_dsn(monkeypatch):
    calls = []
    monkeypatch.setattr(monitoring.sentry_sdk, "init", lambda **kwargs: calls.append(kwargs))

    settings = AppSettings(sentry_dsn="https://key@example.invalid/1", env="staging")

    assert monitoring.configure_error_monitoring(settings) is True
    assert calls[0]["dsn"] == "https://key@example.invalid/1"
    assert calls[0]["environment"] == "staging"
