"""
Broker configuration resolution.

Each of the six broker fields comes from the explicit config mapping first and
from an environment mapping second. Fields are checked in a fixed order
(host, port, login, password, queue, vhost) and the first one that resolves
from neither source raises ConfigError naming it.
"""
from __future__ import annotations

import os
from typing import Any, Mapping

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rabbit_hook.app.constants import (
    CONFIG_ENVIRONMENT,
    ENV_NAMES,
    REQUIRED_FIELDS,
    ResolverState,
)
from rabbit_hook.app.core import SERVICE_NAME
from rabbit_hook.app.errors import ConfigError


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class BrokerConfig(BaseModel):
    """Resolved broker credentials and target queue."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int = Field(..., ge=1, le=65535)
    login: str
    password: str
    queue: str
    vhost: str


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def _lookup(field: str, explicit: Mapping[str, Any], environment: Mapping[str, Any]) -> Any:
    value = explicit.get(field)
    if _is_set(value):
        return value
    value = environment.get(ENV_NAMES[field])
    if _is_set(value):
        return value
    return None


def resolve_config(
    explicit: Mapping[str, Any],
    environment: Mapping[str, Any] | None = None,
) -> BrokerConfig:
    """
    Resolve all broker fields or raise ConfigError for the first missing one.

    An `environment` key inside `explicit` replaces the `environment` argument
    verbatim. When neither is given the process environment is used.
    """
    source = explicit.get(CONFIG_ENVIRONMENT)
    if source is None:
        source = environment if environment is not None else os.environ

    values: dict[str, Any] = {}
    for field in REQUIRED_FIELDS:
        value = _lookup(field, explicit, source)
        if value is None:
            raise ConfigError(field)
        values[field] = value

    try:
        return BrokerConfig(**values)
    except ValidationError as exc:
        errors = exc.errors()
        field = str(errors[0]["loc"][0]) if errors and errors[0].get("loc") else "config"
        raise ConfigError(field, "invalid") from exc


class ConfigResolver:
    """Resolves once and caches. A failed attempt leaves the resolver FRESH."""

    def __init__(
        self,
        explicit: Mapping[str, Any] | None = None,
        environment: Mapping[str, Any] | None = None,
    ) -> None:
        self._explicit: Mapping[str, Any] = dict(explicit or {})
        self._environment = environment
        self._state = ResolverState.FRESH
        self._config: BrokerConfig | None = None

    @property
    def state(self) -> ResolverState:
        return self._state

    def resolve(self) -> BrokerConfig:
        if self._state == ResolverState.RESOLVED and self._config is not None:
            return self._config
        self._config = resolve_config(self._explicit, self._environment)
        self._state = ResolverState.RESOLVED
        _log(
            "config_resolved",
            host=self._config.host,
            port=self._config.port,
            vhost=self._config.vhost,
            queue=self._config.queue,
        )
        return self._config
