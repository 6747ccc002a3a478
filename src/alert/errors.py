from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class AlertError(Exception):
    """Raised by the alerting package itself, never by reporting.

    ``code`` identifies the failure for operators; ``context`` holds the
    values that caused it.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class FatalAlertError(AlertError):
    """Startup misuse. Raised from ``init`` and never meant to be handled."""


@dataclass(frozen=True, slots=True)
class ReinitializedError(FatalAlertError):
    message: str = field(init=False, default="Cannot initialize more than once")
    code: str = field(init=False, default="ALERT_REINITIALIZED")


@dataclass(frozen=True, slots=True)
class ConstructionError(FatalAlertError):
    error: Exception
    message: str = field(init=False)
    code: str = field(init=False, default="ALERT_CONSTRUCTION_FAILED")
    context: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", f"Cannot construct alerter: {self.error}")
        object.__setattr__(self, "context", {"error": repr(self.error)})
