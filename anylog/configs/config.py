import logging
from typing import Literal

from pydantic_settings import BaseSettings

from anylog.sinks.console import Console
from anylog.sinks.logconfig import LoggingSink


class Settings(BaseSettings):
    sink: Literal["console", "logging", "none"] = "console"
    logging_name: str = "anylog"
    diagnostics_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    class Config:
        env_prefix = "ANYLOG_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def sink_from_settings(settings: Settings):
    if settings.sink == "logging":
        return LoggingSink(logging.getLogger(settings.logging_name))
    if settings.sink == "none":
        return None
    return Console()


# one global instance you import everywhere
settings = Settings()
