import sys

import pytest
from fastapi.testclient import TestClient


def _fresh_import_app(monkeypatch):
    # Settings are read from env (not a developer .env); the poller and the Router stay offline.
    monkeypatch.setenv("STATUS_POLL_ENABLED", "false")
    monkeypatch.setenv("CORTENSOR_ROUTER_URL", "http://router.invalid")
    monkeypatch.setenv("CORTENSOR_API_KEY", "test_router_key")
    monkeypatch.setenv("RECOMMEND_RATE_LIMIT", "2/minute")
    monkeypatch.delenv("CATALOG_PATH", raising=False)

    # Drop cached imports so the Settings singleton and service singletons are rebuilt with our env vars.
    for name in list(sys.modules.keys()):
        if name == "app" or name.startswith("app."):
            sys.modules.pop(name, None)

    import app.main  # noqa: E402

    return app.main.app


@pytest.fixture()
def app(monkeypatch):
    return _fresh_import_app(monkeypatch)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def router_transport(app):
    """Install an httpx.MockTransport on the shared Router client.

    Call the returned function with a request handler.
    """
    import httpx
    from app.services.cortensor import cortensor_client

    def install(handler):
        cortensor_client.transport = httpx.MockTransport(handler)
        return cortensor_client

    return install
