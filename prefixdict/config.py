from __future__ import annotations

import logging

from dynaconf import Dynaconf, Validator  # type: ignore[reportMissingTypeStubs]

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def valid_log_level(level: str) -> bool:
    """Check that ``level`` names one of the standard logging levels, in any case."""
    return isinstance(level, str) and level.upper() in LOG_LEVELS


config = Dynaconf(
    envvar_prefix="PREFIXDICT",
    settings_files=["settings.toml", ".secrets.toml"],
    validators=[
        Validator("case_sensitive", default=True, is_type_of=bool),
        Validator("log_level", default="INFO", is_type_of=str, condition=valid_log_level),
        Validator("log_file", default=True, is_type_of=bool),
    ],
)


config.validators.validate()  # type: ignore[reportUnknownMemberType]


def get_log_level(*, debug: bool = False) -> int:
    if debug:
        return logging.DEBUG
    return logging.getLevelNamesMapping()[str(config.log_level).upper()]  # type: ignore[reportUnknownMemberType]
