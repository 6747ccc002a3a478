from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import sentry_sdk
from loguru import logger as default_logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from alert.application.ports import TrackerClient

if TYPE_CHECKING:
    from loguru import Logger


class Settings(BaseSettings):
    dsn: str | None = Field(default=None, validation_alias="ALERT_DSN")
    environment: str | None = Field(default=None, validation_alias="ALERT_ENVIRONMENT")
    channel: str = Field(default="", validation_alias="ALERT_CHANNEL")
    component: str = Field(default="", validation_alias="ALERT_COMPONENT")
    hostname: str = Field(
        default_factory=socket.gethostname, validation_alias="ALERT_HOSTNAME"
    )
    verbose: bool = Field(default=False, validation_alias="ALERT_VERBOSE")
    send_default_pii: bool = Field(default=True, validation_alias="ALERT_SEND_PII")
    log_level: str = Field(default="INFO", validation_alias="ALERT_LOG_LEVEL")

    @field_validator("verbose", mode="before")
    @classmethod
    def _parse_verbose(cls, v: bool | str) -> bool | str:
        if v == "":
            return False
        return v

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@dataclass(frozen=True, slots=True)
class Config:
    """Sink handles and static labels for an :class:`~alert.Alerter`."""

    tracker: TrackerClient | None = None
    logger: Logger | None = None
    channel: str = ""
    component: str = ""
    hostname: str = ""
    verbose: bool = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        logger: Logger | None = None,
        **client_options: Any,
    ) -> Config:
        """Build a config from *settings*.

        The user IP set per alert only survives sentry's scrubber when
        ``send_default_pii`` is on. *client_options* go to ``sentry_sdk.Client``.
        """
        tracker = None
        if settings.dsn:
            tracker = sentry_sdk.Client(
                dsn=settings.dsn,
                environment=settings.environment,
                default_integrations=False,
                send_default_pii=settings.send_default_pii,
                **client_options,
            )
        return cls(
            tracker=tracker,
            logger=logger if logger is not None else default_logger,
            channel=settings.channel,
            component=settings.component,
            hostname=settings.hostname,
            verbose=settings.verbose,
        )
