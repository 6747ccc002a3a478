from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger
from sentry_sdk.scope import Scope

from alert.application.ports import TrackerClient
from alert.domain.context import Option, compose
from alert.domain.frames import TracedError
from alert.infrastructure.reference import refstr
from alert.infrastructure.request import origin_addr, request_data, request_line
from alert.infrastructure.sentry_event import event_from_error

if TYPE_CHECKING:
    from loguru import Logger

    from alert.config import Config


class Alerter:
    """Report errors to a sentry client and/or a loguru logger.

    Reporting is best effort: ``error`` and ``errorf`` never raise, whatever
    happens inside the sinks.
    """

    def __init__(self, config: Config) -> None:
        self._tracker: TrackerClient | None = config.tracker
        self._scope: Scope | None = None
        if config.tracker is not None:
            scope = Scope()
            if config.component:
                scope.set_tag("component", config.component)
            if config.hostname:
                scope.set_tag("host", config.hostname)
            self._scope = scope

        log = config.logger
        if log is not None:
            if config.component:
                log = log.bind(component=config.component)
            if config.hostname:
                log = log.bind(host=config.hostname)
        self._log: Logger | None = log

        self.channel = config.channel
        self.component = config.component
        self.hostname = config.hostname
        self.verbose = config.verbose

    def errorf(self, fmt: str, *args: Any, **kwargs: Any) -> None:
        try:
            err = TracedError(fmt.format(*args, **kwargs), skip=1)
        except Exception as e:
            logger.opt(exception=e).exception("Alert formatting failed")
            return
        self.error(err)

    def error(self, err: BaseException, *options: Option) -> None:
        try:
            self._dispatch(err, options)
        except Exception as e:
            logger.opt(exception=e).exception("Alert preparation failed")

    def _dispatch(self, err: BaseException, options: tuple[Option, ...]) -> None:
        ref = refstr(err)

        scope = self._scope.fork() if self._scope is not None else None
        log: Logger | None = None
        if self.verbose and self._log is not None:
            log = self._log.bind(alert="error")
            if ref:
                log = log.bind(ref=ref)

        cxt = compose(options)
        request_info: dict[str, Any] | None = None

        if (request := cxt.request) is not None:
            if scope is not None:
                request_info = request_data(request)
                scope.set_user({"ip_address": origin_addr(request)})
            if log is not None:
                log = log.bind(request=request_line(request))

        if tags := cxt.tags:
            if scope is not None:
                for key, value in tags.items():
                    scope.set_tag(key, str(value))
                if ref:
                    scope.set_tag("ref", ref)
            if log is not None:
                log = log.bind(**tags)

        if extra := cxt.extra:
            if log is not None:
                log = log.bind(**extra)

        if scope is not None and self._tracker is not None:
            self._capture(self._tracker, scope, err, cxt.extra, request_info)
        if log is not None:
            self._emit(log, err)

    def _capture(
        self,
        tracker: TrackerClient,
        scope: Scope,
        err: BaseException,
        extra: dict[str, Any] | None,
        request_info: dict[str, Any] | None,
    ) -> None:
        try:
            event = event_from_error(err, extra)
            if request_info is not None:
                event["request"] = request_info
            tracker.capture_event(event, scope=scope)
        except Exception as e:
            logger.opt(exception=e).exception("Alert submission failed")

    def _emit(self, log: Logger, err: BaseException) -> None:
        try:
            log.error(str(err))
        except Exception as e:
            logger.opt(exception=e).exception("Alert log emission failed")
