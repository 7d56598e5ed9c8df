
"""Langfuse tracing helpers for tool invocations.

Spans are only recorded when the Langfuse credentials are configured; without
them the helpers are no-ops and ``observe`` leaves the function untouched.
"""

from __future__ import annotations

from typing import Any, Dict, Optional
import os

from langfuse import get_client as _get_client
from langfuse import observe as _observe


_CLIENT = None


def _credentials_present() -> bool:
    required = ("LANGFUSE_PUBLIC_KEY", "LANGFUSE_SECRET_KEY", "LANGFUSE_HOST")
    return all(os.getenv(var) for var in required)


def is_enabled() -> bool:
    """Return True when Langfuse credentials are available."""

    return _credentials_present()


def get_langfuse_client():
    """Return singleton Langfuse client or ``None`` when disabled."""

    global _CLIENT
    if not is_enabled():
        return None
    if _CLIENT is None:
        _CLIENT = _get_client()
    return _CLIENT


def observe(*args, **kwargs):  # type: ignore[override]
    """Wrap :func:`langfuse.observe`, passing functions through when tracing is off."""

    if not is_enabled():
        def passthrough(fn):
            return fn

        return passthrough
    return _observe(*args, **kwargs)


def update_span(
    *,
    input: Any = None,
    output: Any = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> None:
    """Attach data to the current span, if tracing is active."""

    client = get_langfuse_client()
    if not client:
        return
    payload: Dict[str, Any] = {}
    if input is not None:
        payload["input"] = input
    if output is not None:
        payload["output"] = output
    if metadata:
        payload["metadata"] = metadata
    if payload:
        client.update_current_span(**payload)


__all__ = [
    "get_langfuse_client",
    "observe",
    "update_span",
    "is_enabled",
]
