from __future__ import annotations

import hashlib

from alert.domain.capabilities import FrameProvider, Referenced, type_name

REF_LENGTH = 10


def _origin(err: BaseException) -> str | None:
    if isinstance(err, FrameProvider) and callable(err.frames):
        frames = err.frames()
        if frames:
            return f"{frames[0].path}:{frames[0].line}"
    tb = err.__traceback__
    if tb is None:
        return None
    while tb.tb_next is not None:
        tb = tb.tb_next
    return f"{tb.tb_frame.f_code.co_filename}:{tb.tb_lineno}"


def refstr(err: BaseException) -> str:
    """Return a short reference string for *err*, or ``""`` if none applies.

    The same error type raised from the same place always yields the same
    reference, which lets a log line be matched with its tracked event.
    """
    if isinstance(err, Referenced) and callable(err.ref):
        ref = err.ref()
        if ref:
            return ref
    origin = _origin(err)
    if origin is None:
        return ""
    digest = hashlib.sha1(f"{type_name(err)}@{origin}".encode("utf-8"))
    return digest.hexdigest()[:REF_LENGTH]
