from __future__ import annotations

"""Generic adapter turning one tool call into one WooCommerce REST request."""

from typing import Any, Dict, Iterable, Literal, Optional
from urllib.parse import quote
import base64
import json
import logging

import httpx
from pydantic import ValidationError

from core.config import WooCommerceSettings, get_settings
from core.debug_log import dbg, redact
from core.langfuse_tracing import observe, update_span
from core.schema import AdapterOutcome, ErrorKind, ToolDefinition

logger = logging.getLogger(__name__)

ArgumentStyle = Literal["query", "body"]


def basic_auth_header(key: str, secret: str) -> str:
    """Return the ``Authorization`` value for Basic auth, even for empty credentials."""
    token = base64.b64encode(f"{key}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return value


class HttpToolAdapter:
    """Expose a single WooCommerce endpoint as a callable tool.

    The adapter validates the arguments against ``definition``, substitutes the
    path parameters into ``path``, sends the remaining arguments either as query
    parameters or as a JSON body, and sends exactly one request. ``call`` never
    raises: every failure becomes ``{"error": error_message}`` and the details go
    to the log.

    Settings passed at construction are used for every call; without them the
    configuration is resolved again on each call.
    """

    def __init__(
        self,
        definition: ToolDefinition,
        method: str,
        path: str,
        error_message: str,
        *,
        path_params: Iterable[str] = ("id",),
        argument_style: ArgumentStyle = "query",
        defaults: Optional[Dict[str, Any]] = None,
        settings: Optional[WooCommerceSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.definition = definition
        self.name = definition.name
        self.method = method.upper()
        self.path = path
        self.error_message = error_message
        self.path_params = tuple(path_params)
        self.argument_style = argument_style
        self.defaults = dict(defaults or {})
        self.settings = settings
        self.transport = transport
        self._args_model = definition.args_model()
        self._traced_call = observe(
            as_type="span",
            name=f"woocommerce-{self.name}",
            capture_input=False,
            capture_output=False,
        )(self._call)

    # Request construction -----------------------------------------------------
    def _resolve_settings(self) -> WooCommerceSettings:
        return self.settings if self.settings is not None else get_settings()

    def build_request(self, arguments: Dict[str, Any], settings: WooCommerceSettings) -> httpx.Request:
        """Build the outgoing request from already validated arguments."""
        supplied = {k: v for k, v in arguments.items() if v is not None}
        path_values = {
            name: quote(str(supplied.pop(name, "")), safe="") for name in self.path_params
        }
        url = settings.base_url.rstrip("/") + self.path.format(**path_values)

        payload = {**self.defaults, **supplied}
        key, secret = settings.credentials()
        headers = {
            "Content-Type": "application/json",
            "Authorization": basic_auth_header(key, secret),
        }
        if self.argument_style == "body":
            return httpx.Request(self.method, url, headers=headers, json=payload)
        params = {k: _query_value(v) for k, v in payload.items()}
        return httpx.Request(self.method, url, headers=headers, params=params)

    # Execution ---------------------------------------------------------------
    async def _send(self, request: httpx.Request, settings: WooCommerceSettings) -> httpx.Response:
        timeout = httpx.Timeout(settings.timeout, connect=min(10.0, settings.timeout))
        # requests built outside a client carry no timeout of their own
        request.extensions["timeout"] = timeout.as_dict()
        async with httpx.AsyncClient(
            timeout=timeout, transport=self.transport, follow_redirects=True
        ) as client:
            return await client.send(request)

    @staticmethod
    def _error_detail(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    async def invoke(self, /, **arguments: Any) -> AdapterOutcome:
        """Run the tool and return the outcome with its failure kind preserved."""
        try:
            validated = self._args_model.model_validate(arguments)
        except ValidationError as exc:
            return AdapterOutcome.failure(
                ErrorKind.INVALID_ARGUMENTS,
                detail=exc.errors(include_url=False, include_input=False),
            )

        try:
            settings = self._resolve_settings()
            request = self.build_request(validated.model_dump(), settings)
            dbg.tool_call(
                self.name,
                self.method,
                str(request.url).split("?", 1)[0],
                validated.model_dump(exclude_none=True),
            )
            response = await self._send(request, settings)
        except httpx.HTTPError as exc:
            return AdapterOutcome.failure(
                ErrorKind.TRANSPORT_FAILURE, detail=f"{type(exc).__name__}: {exc}"
            )
        except Exception as exc:
            logger.debug("Unexpected error preparing or sending %s", self.name, exc_info=True)
            return AdapterOutcome.failure(
                ErrorKind.TRANSPORT_FAILURE, detail=f"{type(exc).__name__}: {exc}"
            )

        if not response.is_success:
            return AdapterOutcome.failure(
                ErrorKind.REMOTE_REJECTION,
                detail=self._error_detail(response),
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as exc:
            return AdapterOutcome.failure(
                ErrorKind.INVALID_RESPONSE,
                detail=f"Undecodable response body: {exc}",
                status_code=response.status_code,
            )
        return AdapterOutcome.success(data, status_code=response.status_code)

    async def _call(self, /, **arguments: Any) -> Any:
        update_span(input=redact(arguments), metadata={"tool": self.name, "method": self.method})
        outcome = await self.invoke(**arguments)
        dbg.tool_result(
            self.name,
            ok=outcome.ok,
            status_code=outcome.status_code,
            kind=outcome.kind.value if outcome.kind else None,
        )
        if not outcome.ok:
            logger.error(
                "Error in %s (%s, status=%s): %s",
                self.name,
                outcome.kind.value if outcome.kind else "unknown",
                outcome.status_code,
                outcome.detail,
            )
            update_span(output={"error": self.error_message}, metadata={"status": "error"})
        else:
            update_span(metadata={"status": "success", "status_code": outcome.status_code})
        return outcome.to_result(self.error_message)

    async def call(self, /, **arguments: Any) -> Any:
        """Invoke the tool; returns the decoded JSON body or ``{"error": ...}``."""
        return await self._traced_call(**arguments)


__all__ = ["HttpToolAdapter", "basic_auth_header"]
