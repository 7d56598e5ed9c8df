"""Tool adapter registry and the WooCommerce adapters."""

from typing import Optional

from core.config import WooCommerceSettings, load_environment
from core.debug_log import dbg

from .registry import (
    clear_registry,
    execute_tool,
    get_tool,
    is_registered,
    list_definitions,
    register_tool,
)
from .http import HttpToolAdapter, basic_auth_header
from .woocommerce import build_adapters


def register_default_adapters(settings: Optional[WooCommerceSettings] = None) -> None:
    """Register every WooCommerce adapter that is not registered yet.

    Loads a ``.env`` file first so that credentials defined there are visible when
    settings are resolved at call time.
    """
    load_environment()
    dbg.maybe_enable_from_env()
    for adapter in build_adapters(settings=settings):
        if not is_registered(adapter.name):
            register_tool(adapter)


__all__ = [
    "register_tool",
    "get_tool",
    "is_registered",
    "clear_registry",
    "list_definitions",
    "execute_tool",
    "HttpToolAdapter",
    "basic_auth_header",
    "build_adapters",
    "register_default_adapters",
]
