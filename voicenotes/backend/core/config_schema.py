"""
Configuration Schemas.

One model per file in config/settings/, named after it: ApplicationSchema
for application.yaml, LoggingSchema for logging.yaml, MessagingSchema for
messaging.yaml. Every model forbids unknown keys, so a typo in a settings
file stops the process at startup with the offending key in the message.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


# application.yaml


class ServerSchema(_Section):
    host: str
    port: int = Field(gt=0, lt=65536)


class CorsSchema(_Section):
    origins: list[str]


class TimeoutsSchema(_Section):
    external_api: int = Field(gt=0)


class ApplicationSchema(_Section):
    name: str
    version: str
    description: str
    environment: str
    debug: bool
    api_prefix: str = Field(pattern=r"^/")
    server: ServerSchema
    cors: CorsSchema
    timeouts: TimeoutsSchema


# logging.yaml


class ConsoleHandlerSchema(_Section):
    enabled: bool


class FileHandlerSchema(_Section):
    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


class HandlersSchema(_Section):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_Section):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["json", "console"]
    handlers: HandlersSchema


# messaging.yaml


class MessagingSchema(_Section):
    provider: Literal["mock"]
    simulated_delay_seconds: float = Field(ge=0)
    default_message_type: Literal["text", "voice"]
