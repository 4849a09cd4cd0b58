import logging

import httpx

import trackinfo.__main__ as entry
from trackinfo.core.http_client import HttpClientManager


def test_main_builds_app_from_environment(monkeypatch):
    calls = []
    monkeypatch.setenv("PORT", "9123")
    monkeypatch.setattr(entry.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    entry.main()

    (app, kwargs), = calls
    assert kwargs == {"host": "0.0.0.0", "port": 9123}
    assert app.state.settings.port == 9123


def test_configure_warns_when_client_already_open(monkeypatch, caplog):
    monkeypatch.setattr(HttpClientManager, "_client", httpx.AsyncClient())
    monkeypatch.setattr(HttpClientManager, "timeout", 20.0)

    with caplog.at_level(logging.WARNING, logger="trackinfo.core.http_client"):
        HttpClientManager.configure(timeout=5.0)

    assert HttpClientManager.timeout == 5.0
    assert "already open" in caplog.text


def test_configure_before_client_is_silent(monkeypatch, caplog):
    monkeypatch.setattr(HttpClientManager, "_client", None)
    monkeypatch.setattr(HttpClientManager, "timeout", 20.0)

    with caplog.at_level(logging.WARNING, logger="trackinfo.core.http_client"):
        HttpClientManager.configure(timeout=5.0)

    assert caplog.text == ""
