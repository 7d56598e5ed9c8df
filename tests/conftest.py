import json

import httpx
import pytest

from core.config import WooCommerceSettings, clear_config_cache
from core.debug_log import dbg
from tools import registry


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch, tmp_path):
    """Keep tests independent of the developer's environment and config files."""
    for var in (
        "WOOCOMMERCE_API_BASE_URL",
        "WOOCOMMERCE_API_KEY",
        "WOOCOMMERCE_API_SECRET",
        "WOOCOMMERCE_API_USERNAME",
        "WOOCOMMERCE_API_PASSWORD",
        "WOOCOMMERCE_TIMEOUT",
        "LANGFUSE_PUBLIC_KEY",
        "LANGFUSE_SECRET_KEY",
        "LANGFUSE_HOST",
        "DEBUG_LOG",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("WOOCOMMERCE_CONFIG_PATH", str(tmp_path / "missing.yaml"))
    monkeypatch.setattr(registry, "_tool_registry", {})
    clear_config_cache()
    dbg.enable(False)
    dbg.clear()
    yield
    clear_config_cache()
    dbg.enable(False)
    dbg.clear()


@pytest.fixture
def settings():
    return WooCommerceSettings(
        base_url="https://shop.example.com/wp-json",
        api_key="ck_test",
        api_secret="cs_test",
    )


class RecordingTransport(httpx.MockTransport):
    """Mock transport answering with a fixed response and keeping every request."""

    def __init__(self, status_code=200, payload=None, content=None, exc=None):
        self.requests = []

        def handler(request):
            self.requests.append(request)
            if exc is not None:
                raise exc("mocked failure", request=request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=payload if payload is not None else {})

        super().__init__(handler)

    @property
    def last(self):
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content.decode("utf-8"))


@pytest.fixture
def make_transport():
    return RecordingTransport
