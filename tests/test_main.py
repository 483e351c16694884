import httpx
import pytest
from fastapi.testclient import TestClient

import dependencies
import main
from config import AssemblyAIConfig

FRONTEND_ORIGIN = "http://localhost:3000"


def _with_api_key(api_key: str):
    return dependencies.get_config().model_copy(
        update={"assemblyai": AssemblyAIConfig(api_key=api_key)}
    )


def test_startup_without_api_key_is_refused(monkeypatch):
    monkeypatch.setattr(dependencies, "_config", _with_api_key(""))

    with pytest.raises(RuntimeError, match="ASSEMBLYAI_API_KEY"):
        with TestClient(main.app):
            pass


def test_shutdown_closes_http_client(monkeypatch):
    http_client = httpx.AsyncClient()
    monkeypatch.setattr(dependencies, "_config", _with_api_key("test-key"))
    monkeypatch.setattr(dependencies, "_http_client", http_client)

    with TestClient(main.app):
        assert not http_client.is_closed

    assert http_client.is_closed


def test_cors_preflight_allows_configured_origin():
    response = TestClient(main.app).options(
        "/api/transcribe",
        headers={
            "Origin": FRONTEND_ORIGIN,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == FRONTEND_ORIGIN


def test_cors_rejects_unknown_origin():
    response = TestClient(main.app).options(
        "/api/transcribe",
        headers={
            "Origin": "https://evil.test",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers
