"""App wiring — lifespan logging setup and CORS configured from settings.

Invariants:
    - lifespan calls setup_logging with Settings.log_level / log_format
    - Preflight and simple requests from a configured origin get it echoed back
    - Unknown origins never receive access-control-allow-origin
"""

import bazinga.main as main_module
from bazinga.config import Settings
from bazinga.main import app, lifespan


async def test_lifespan_configures_logging_from_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(
        main_module, "get_settings",
        lambda: Settings(_env_file=None, log_level="DEBUG", log_format="text"),
    )
    monkeypatch.setattr(
        main_module, "setup_logging", lambda level, fmt: calls.append((level, fmt)),
    )

    async with lifespan(app):
        assert calls == [("DEBUG", "text")]

    assert len(calls) == 1


async def test_cors_preflight_allows_configured_origin(client):
    origin = main_module.settings.cors_origins[0]
    res = await client.options(
        "/api/v1/bazingafy",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == origin


async def test_cors_simple_request_echoes_configured_origin(client):
    origin = main_module.settings.cors_origins[0]
    res = await client.post(
        "/api/v1/bazingafy", json={"word": "bear"}, headers={"Origin": origin},
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == origin


async def test_cors_rejects_unknown_origin(client):
    res = await client.options(
        "/api/v1/bazingafy",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert res.status_code == 400
    assert "access-control-allow-origin" not in res.headers
