"""Optional capabilities an error may expose.

Errors are probed with ``isinstance`` against these runtime-checkable
protocols, so any exception type can opt into richer reporting by defining
the matching method.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from alert.domain.frames import Frame


@runtime_checkable
class Titled(Protocol):
    def title(self) -> str: ...  # pragma: no cover


@runtime_checkable
class FrameProvider(Protocol):
    def frames(self) -> Sequence[Frame]: ...  # pragma: no cover


@runtime_checkable
class Unwrappable(Protocol):
    def unwrap(self) -> BaseException | None: ...  # pragma: no cover


@runtime_checkable
class Caused(Protocol):
    def cause(self) -> BaseException | None: ...  # pragma: no cover


@runtime_checkable
class Referenced(Protocol):
    def ref(self) -> str: ...  # pragma: no cover


def next_error(err: BaseException) -> BaseException | None:
    """Return the error *err* wraps, or ``None`` at the end of the chain."""
    if isinstance(err, Unwrappable) and callable(err.unwrap):
        return err.unwrap()
    if isinstance(err, Caused) and callable(err.cause):
        return err.cause()
    if err.__cause__ is not None:
        return err.__cause__
    if err.__suppress_context__:
        return None
    return err.__context__


def maybe_unwrap(err: BaseException) -> BaseException:
    """Follow ``unwrap()`` one level when the error supports it."""
    if isinstance(err, Unwrappable) and callable(err.unwrap):
        inner = err.unwrap()
        if inner is not None:
            return inner
    return err


def type_name(err: BaseException) -> str:
    cls = type(err)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
