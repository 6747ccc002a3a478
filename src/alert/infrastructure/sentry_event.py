"""Build sentry events from error chains.

Sentry expects the ``exception.values`` list ordered from the innermost
cause to the outermost error, and each stacktrace ordered from the oldest
call to the most recent one.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sentry_sdk.utils import iter_stacks, serialize_frame

from alert.domain.capabilities import (
    FrameProvider,
    Titled,
    maybe_unwrap,
    next_error,
    type_name,
)
from alert.domain.frames import Frame

MAX_ERROR_DEPTH = 3

Event = dict[str, Any]
Stacktrace = dict[str, Any]


def convert_stacktrace(frames: Sequence[Frame]) -> Stacktrace:
    conv: list[dict[str, Any]] = [{} for _ in frames]
    for i, frame in enumerate(frames):
        conv[len(frames) - i - 1] = {
            "lineno": frame.line,
            "filename": frame.file,
            "abs_path": frame.path,
            "function": frame.name,
        }
    return {"frames": conv}


def traceback_stacktrace(err: BaseException) -> Stacktrace | None:
    """Walk the traceback of a raised error with sentry's own serializer."""
    if err.__traceback__ is None:
        return None
    frames = [
        serialize_frame(
            tb.tb_frame,
            tb_lineno=tb.tb_lineno,
            include_local_variables=False,
            include_source_context=False,
        )
        for tb in iter_stacks(err.__traceback__)
    ]
    if not frames:
        return None
    return {"frames": frames}


def extract_stacktrace(
    err: BaseException,
) -> tuple[BaseException, Stacktrace | None]:
    """Describe the stack of *err*.

    Returns the error to continue unwinding from along with the stack. Only
    errors that provide their own frames advance the chain here.
    """
    if isinstance(err, FrameProvider):
        return maybe_unwrap(err), convert_stacktrace(err.frames())
    return err, traceback_stacktrace(err)


def exception_values(err: BaseException | None) -> list[dict[str, Any]]:
    values: list[dict[str, Any]] = []
    seen: set[int] = set()
    depth = 0
    while depth < MAX_ERROR_DEPTH and err is not None and id(err) not in seen:
        seen.add(id(err))
        advanced, stack = extract_stacktrace(err)
        value: dict[str, Any] = {"type": type_name(err), "value": str(err)}
        if stack is not None:
            value["stacktrace"] = stack
        values.append(value)
        err = advanced if advanced is not err else next_error(err)
        depth += 1
    values.reverse()
    return values


def event_from_error(
    err: BaseException,
    extra: dict[str, Any] | None = None,
    level: str = "error",
) -> Event:
    event: Event = {"level": level, "extra": extra or {}}
    if isinstance(err, Titled):
        title = err.title()
        if title:
            event["message"] = title
    event["exception"] = {"values": exception_values(err)}
    return event
