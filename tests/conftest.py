import threading
from types import SimpleNamespace
from typing import Any

import pytest
from loguru import logger
from sentry_sdk.scope import Scope
from sentry_sdk.transport import Transport

from alert.application import registry


class RecordingTracker:
    """Stand-in for ``sentry_sdk.Client`` that keeps what it receives."""

    def __init__(self) -> None:
        self.captured: list[tuple[dict[str, Any], Scope]] = []
        self._lock = threading.Lock()

    def capture_event(
        self, event: dict[str, Any], hint: Any = None, scope: Any = None
    ) -> str:
        with self._lock:
            self.captured.append((event, scope))
        return "event-id"


class FailingTracker:
    def capture_event(self, event: Any, hint: Any = None, scope: Any = None) -> str:
        raise RuntimeError("tracker down")


def applied(scope: Scope) -> dict[str, Any]:
    """Return what *scope* contributes to an outgoing event."""
    return scope.apply_to_event({}, {})


def make_request(
    method: str = "GET", url: str = "/x", addr: str = "1.2.3.4", **headers: str
) -> SimpleNamespace:
    return SimpleNamespace(method=method, url=url, remote_addr=addr, headers=headers)


@pytest.fixture
def tracker() -> RecordingTracker:
    return RecordingTracker()


@pytest.fixture
def log_records():
    """Collect loguru records emitted by alerters."""
    records: list[dict[str, Any]] = []
    sink_id = logger.add(
        lambda message: records.append(message.record),
        level="DEBUG",
        filter=lambda record: record["extra"].get("alert") == "error",
    )
    yield records
    logger.remove(sink_id)


@pytest.fixture
def fresh_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run with no process-wide alerter installed."""
    monkeypatch.setattr(registry, "_shared", None)


class RecordingTransport(Transport):
    """sentry transport that keeps envelopes instead of sending them."""

    def __init__(self, options: Any = None) -> None:
        super().__init__(options)
        self.envelopes: list[Any] = []

    def capture_envelope(self, envelope: Any) -> None:
        self.envelopes.append(envelope)
