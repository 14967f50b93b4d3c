from __future__ import annotations

import httpx
import pytest

from userhub_backend import healthcheck


def _respond_with(
    monkeypatch: pytest.MonkeyPatch, response: httpx.Response | Exception
) -> list[str]:
    calls: list[str] = []

    def fake_get(url: str, *, timeout: float) -> httpx.Response:
        calls.append(url)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(healthcheck.httpx, "get", fake_get)
    return calls


def test_probe_accepts_ok_status(monkeypatch: pytest.MonkeyPatch) -> None:
    _respond_with(monkeypatch, httpx.Response(200, json={"status": "OK"}))

    assert healthcheck.probe("http://svc/health") is True


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(503, json={"status": "OK"}),
        httpx.Response(200, json={"status": "DEGRADED"}),
        httpx.Response(200, text="not json"),
        httpx.ConnectError("refused"),
    ],
)
def test_probe_rejects_unhealthy(
    monkeypatch: pytest.MonkeyPatch, response: httpx.Response | Exception
) -> None:
    _respond_with(monkeypatch, response)

    assert healthcheck.probe("http://svc/health") is False


def test_main_uses_configured_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "4321")
    calls = _respond_with(monkeypatch, httpx.Response(200, json={"status": "OK"}))

    assert healthcheck.main([]) == 0
    assert calls == ["http://127.0.0.1:4321/health"]


def test_main_exit_code_on_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    _respond_with(monkeypatch, httpx.Response(500))

    assert healthcheck.main(["--url", "http://svc/health"]) == 1
