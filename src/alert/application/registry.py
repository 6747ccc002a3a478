"""The process-wide default alerter.

``init`` installs it exactly once; the package-level ``error`` and
``errorf`` forward to it and do nothing until it exists.
"""

from __future__ import annotations

import threading
from typing import Any

from loguru import logger

from alert.application.alerter import Alerter
from alert.config import Config, Settings
from alert.domain.context import Option
from alert.domain.frames import TracedError
from alert.errors import ConstructionError, ReinitializedError
from alert.logs import configure_logging

_shared: Alerter | None = None
_lock = threading.Lock()


def init(config: Config) -> None:
    """Install the default alerter.

    Raises :class:`ReinitializedError` on a second call and
    :class:`ConstructionError` if the alerter cannot be built. Both are
    startup bugs and are not meant to be caught.
    """
    global _shared
    with _lock:
        if _shared is not None:
            raise ReinitializedError()
        try:
            _shared = Alerter(config)
        except Exception as e:
            raise ConstructionError(error=e) from e


def setup(settings: Settings | None = None) -> None:
    """Configure loguru and install the default alerter from *settings*.

    Reads ``ALERT_*`` from the environment when *settings* is omitted.
    """
    settings = settings if settings is not None else Settings()
    configure_logging(settings.log_level)
    init(Config.from_settings(settings))


def default() -> Alerter | None:
    return _shared


def errorf(fmt: str, *args: Any, **kwargs: Any) -> None:
    with _lock:
        if _shared is None:
            return
        try:
            err = TracedError(fmt.format(*args, **kwargs), skip=1)
        except Exception as e:
            logger.opt(exception=e).exception("Alert formatting failed")
            return
        _shared.error(err)


def error(err: BaseException, *options: Option) -> None:
    with _lock:
        if _shared is not None:
            _shared.error(err, *options)
