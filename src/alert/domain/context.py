from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict

Tags = dict[str, Any]


class Context(BaseModel):
    """Per-call reporting context."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    request: Any | None = None
    tags: Tags | None = None
    extra: dict[str, Any] | None = None


Option = Callable[[Context], Context]


def with_request(request: Any) -> Option:
    def apply(cxt: Context) -> Context:
        return cxt.model_copy(update={"request": request})

    return apply


def with_tags(tags: Tags) -> Option:
    def apply(cxt: Context) -> Context:
        return cxt.model_copy(update={"tags": tags})

    return apply


def with_extra(extra: dict[str, Any]) -> Option:
    def apply(cxt: Context) -> Context:
        return cxt.model_copy(update={"extra": extra})

    return apply


def compose(options: Iterable[Option]) -> Context:
    """Fold *options* left to right over an empty context."""
    cxt = Context()
    for option in options:
        cxt = option(cxt)
    return cxt
