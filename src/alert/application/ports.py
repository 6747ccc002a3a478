from __future__ import annotations

from typing import Any, Protocol


class TrackerClient(Protocol):
    """The part of ``sentry_sdk.Client`` the alerter submits events through."""

    def capture_event(
        self, event: Any, hint: Any = None, scope: Any = None
    ) -> str | None: ...  # pragma: no cover


class RequestProtocol(Protocol):
    method: str
    url: Any
