from __future__ import annotations

from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import threading
import json
import os


_SECRET_TOKENS = ("authorization", "password", "secret", "api_key", "apikey")


class DebugLog:
    """In-memory structured log of tool calls and their outcomes.

    Disabled by default; turn on with ``enable()`` or ``DEBUG_LOG=1``. Secret
    fields are redacted before anything is stored.
    """

    def __init__(self) -> None:
        self._events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()
        self.enabled: bool = False

    # Control -----------------------------------------------------------------
    def enable(self, value: bool = True) -> None:
        self.enabled = value

    def maybe_enable_from_env(self) -> None:
        if self.enabled:
            return
        val = os.getenv("DEBUG_LOG")
        if val and str(val).lower() in {"1", "true", "yes", "on"}:
            self.enabled = True

    def is_enabled(self) -> bool:
        return self.enabled

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    # Recording ---------------------------------------------------------------
    def event(self, name: str, **fields: Any) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._events.append(
                {
                    "ts": datetime.now(timezone.utc).isoformat(timespec="seconds"),
                    "name": name,
                    **redact(fields),
                }
            )

    def tool_call(self, tool: str, method: str, url: str, arguments: Dict[str, Any]) -> None:
        self.event("tool_call", tool=tool, method=method, url=url, arguments=arguments)

    def tool_result(
        self,
        tool: str,
        *,
        ok: bool,
        status_code: Optional[int] = None,
        kind: Optional[str] = None,
    ) -> None:
        self.event("tool_result", tool=tool, ok=ok, status_code=status_code, kind=kind)

    # Export ------------------------------------------------------------------
    def get_events(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._events)

    def dump_json(self) -> str:
        return json.dumps(self.get_events(), ensure_ascii=False, indent=2)

    def dump_text(self) -> str:
        lines: List[str] = []
        for e in self.get_events():
            meta = {k: v for k, v in e.items() if k not in {"ts", "name"}}
            lines.append(f"[{e['ts']}] {e['name']}: " + json.dumps(meta, ensure_ascii=False))
        return "\n".join(lines)


def redact(value: Any) -> Any:
    """Replace values under secret-looking keys, recursing into mappings and lists."""
    if isinstance(value, dict):
        return {
            k: "[redacted]" if any(t in str(k).lower() for t in _SECRET_TOKENS) else redact(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [redact(v) for v in value]
    return value


# Global singleton
dbg = DebugLog()


__all__ = ["dbg", "DebugLog", "redact"]
