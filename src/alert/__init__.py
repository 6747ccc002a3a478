"""Process-wide error alerting backed by sentry and loguru."""

from alert.application.alerter import Alerter
from alert.application.registry import default, error, errorf, init, setup
from alert.config import Config, Settings
from alert.domain.context import (
    Context,
    Option,
    Tags,
    with_extra,
    with_request,
    with_tags,
)
from alert.domain.frames import Frame, TracedError
from alert.errors import (
    AlertError,
    ConstructionError,
    FatalAlertError,
    ReinitializedError,
)
from alert.infrastructure.sentry_event import MAX_ERROR_DEPTH

__all__ = [
    "MAX_ERROR_DEPTH",
    "AlertError",
    "Alerter",
    "Config",
    "ConstructionError",
    "Context",
    "FatalAlertError",
    "Frame",
    "Option",
    "ReinitializedError",
    "Settings",
    "Tags",
    "TracedError",
    "default",
    "error",
    "errorf",
    "init",
    "setup",
    "with_extra",
    "with_request",
    "with_tags",
]
