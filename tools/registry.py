from __future__ import annotations

"""Simple registry for tool adapters."""

from typing import Any, Dict, List, Optional

from .types import ToolAdapter


_tool_registry: Dict[str, ToolAdapter] = {}


def register_tool(adapter: ToolAdapter) -> None:
    """Register a tool adapter by its name.

    Args:
        adapter: Tool adapter instance implementing ``ToolAdapter`` protocol.
    """
    _tool_registry[adapter.name] = adapter


def get_tool(name: str) -> ToolAdapter:
    """Retrieve a registered tool adapter by name.

    Raises:
        KeyError: If the tool is not registered.
    """
    try:
        return _tool_registry[name]
    except KeyError as exc:
        raise KeyError(f"Tool '{name}' is not registered") from exc


def is_registered(name: str) -> bool:
    return name in _tool_registry


def clear_registry() -> None:
    _tool_registry.clear()


def list_definitions() -> List[Dict[str, Any]]:
    """Return function-tool schemas for every registered adapter, sorted by name."""
    return [
        _tool_registry[name].definition.to_function_schema()
        for name in sorted(_tool_registry)
    ]


async def execute_tool(name: str, arguments: Optional[Dict[str, Any]] = None) -> Any:
    """Dispatch a call by tool name, as a tool-calling framework would."""
    if not is_registered(name):
        return {"error": f"Unknown tool: {name}"}
    # keyword names must be strings; anything else cannot name a parameter
    supplied = {k: v for k, v in (arguments or {}).items() if isinstance(k, str)}
    return await _tool_registry[name].call(**supplied)
