"""Adapters over framework request objects.

Requests are duck-typed: anything with ``method`` and ``url`` works.
Werkzeug/Flask (``remote_addr``) and Starlette (``client.host``) style
objects are understood for the origin address.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from alert.application.ports import RequestProtocol


def _header(request: Any, name: str) -> str | None:
    headers = getattr(request, "headers", None)
    if not isinstance(headers, Mapping):
        return None
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value


def origin_addr(request: RequestProtocol) -> str:
    """Return the address the request originated from, or ``""``."""
    origin = getattr(request, "origin_addr", None)
    if callable(origin):
        origin = origin()
    if origin:
        return str(origin)

    forwarded = _header(request, "X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    remote = getattr(request, "remote_addr", None)
    if remote:
        return str(remote)

    client = getattr(request, "client", None)
    host = getattr(client, "host", None)
    return str(host) if host else ""


def request_line(request: RequestProtocol) -> str:
    return f"{request.method} {request.url}"


def request_data(request: RequestProtocol) -> dict[str, Any]:
    """Describe *request* in sentry's ``request`` interface shape."""
    data: dict[str, Any] = {
        "method": str(request.method),
        "url": str(request.url),
    }
    headers = getattr(request, "headers", None)
    if isinstance(headers, Mapping):
        data["headers"] = {str(k): str(v) for k, v in headers.items()}
    origin = origin_addr(request)
    if origin:
        data["env"] = {"REMOTE_ADDR": origin}
    return data
