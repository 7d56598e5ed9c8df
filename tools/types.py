from __future__ import annotations

"""Common types for tool adapters."""

from typing import Any, Protocol

from core.schema import ToolDefinition


class ToolAdapter(Protocol):
    """Protocol for a tool adapter."""

    name: str
    definition: ToolDefinition

    async def call(self, **arguments: Any) -> Any:
        """Execute the tool and return the decoded payload or an ``{"error": ...}`` object."""
        ...
