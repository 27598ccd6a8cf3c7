"""Settings for the client's transport behaviour (not broker credentials)."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    transport_backend: str = Field("rabbitmq", validation_alias="QUEUE_CLIENT_TRANSPORT_BACKEND")

    persistent_delivery: bool = Field(True, validation_alias="QUEUE_CLIENT_PERSISTENT_DELIVERY")
    content_type: str = Field("application/json", validation_alias="QUEUE_CLIENT_CONTENT_TYPE")

    # None means no timeout; the caller imposes one if needed.
    publish_timeout_seconds: float | None = Field(None, validation_alias="QUEUE_CLIENT_PUBLISH_TIMEOUT_SECONDS")
    connect_timeout_seconds: float | None = Field(None, validation_alias="QUEUE_CLIENT_CONNECT_TIMEOUT_SECONDS")
