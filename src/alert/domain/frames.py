from __future__ import annotations

import os
import sys
import traceback
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict


class Frame(BaseModel):
    """A single call-site location."""

    model_config = ConfigDict(frozen=True)

    line: int
    file: str
    path: str
    name: str


def capture_frames(skip: int = 0) -> list[Frame]:
    """Capture the caller's stack, innermost call first.

    *skip* drops that many additional frames above the caller.
    """
    summary = traceback.extract_stack(sys._getframe(skip + 1))
    return [
        Frame(
            line=entry.lineno or 0,
            file=os.path.basename(entry.filename),
            path=os.path.abspath(entry.filename),
            name=entry.name,
        )
        for entry in reversed(summary)
    ]


class TracedError(Exception):
    """An exception that remembers where it was created.

    ``TracedError`` exposes every optional reporting capability: a title,
    the frames of its construction site, the error it wraps and an
    explicit reference string.
    """

    def __init__(
        self,
        message: str,
        *,
        title: str | None = None,
        cause: BaseException | None = None,
        ref: str | None = None,
        skip: int = 0,
    ) -> None:
        super().__init__(message)
        self.message = message
        self._title = title or ""
        self._ref = ref or ""
        self._frames = capture_frames(skip + 1)
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def title(self) -> str:
        return self._title

    def frames(self) -> Sequence[Frame]:
        return self._frames

    def unwrap(self) -> BaseException | None:
        return self.__cause__

    def ref(self) -> str:
        return self._ref
