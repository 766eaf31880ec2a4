import logging
import sys
from typing import Literal
import structlog
import pydantic
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    data_file: str = pydantic.Field(
        "pets.json",
        description="Path to the pet data file.",
    )
    max_size: int | None = pydantic.Field(
        None,
        description="Maximum number of pets, unlimited if unset.",
        ge=0,
    )
    validate_age: bool = pydantic.Field(
        True,
        description="Reject ages outside of min_age..max_age.",
    )
    min_age: int = pydantic.Field(1, description="Youngest allowed age.")
    max_age: int = pydantic.Field(20, description="Oldest allowed age.")
    name_search_case_sensitive: bool = pydantic.Field(
        False,
        description="Whether the menu's name search respects case.",
    )
    sentinel: str = pydantic.Field(
        "done",
        description="Line that ends batch input.",
    )
    messages_file: str | None = pydantic.Field(
        None,
        description="JSON file overriding user-facing messages.",
    )
    log_level: Literal["debug", "info", "warning", "error", "critical"] = pydantic.Field(
        "warning",
        description="Logging level.",
    )
    log_file: str = pydantic.Field(
        "STDERR",
        description="Path to the log file, or STDOUT/STDERR.",
    )
    log_format: Literal["text", "json"] = pydantic.Field(
        "text",
        description="Log format.",
    )
    model_config = SettingsConfigDict(env_prefix="petdb_")

    @pydantic.field_validator("log_level", "log_format", mode="before")
    @classmethod
    def _lowercase(cls, value):
        return value.lower() if isinstance(value, str) else value

    @pydantic.model_validator(mode="after")
    def _check_age_bounds(self) -> "Config":
        if self.min_age > self.max_age:
            raise ValueError(f"min_age {self.min_age} is above max_age {self.max_age}")
        return self

    @property
    def age_range(self) -> tuple[int, int] | None:
        if not self.validate_age:
            return None
        return (self.min_age, self.max_age)


def load_config(**overrides) -> Config:
    config = Config(**overrides)
    # configure log output
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(),
    ]
    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    if config.log_file == "STDOUT":
        factory = structlog.PrintLoggerFactory()
    elif config.log_file == "STDERR":
        # look up sys.stderr per logger, it may be swapped after configuration
        def factory(*args):
            return structlog.PrintLogger(file=sys.stderr)
    else:
        factory = structlog.PrintLoggerFactory(file=open(config.log_file, "a"))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.log_level.upper())
        ),
        logger_factory=factory,
    )
    return config
