"""Configuration for a twig session.

Settings come from an optional INI file::

    [core]
    default_branch = main

    [log]
    level = INFO

A missing file, section or key falls back to the defaults on ``TwigConfig``.
"""
from pathlib import Path
from pydantic import BaseModel, field_validator
import configparser
import logging

logger = logging.getLogger(__name__)

DEFAULT_BRANCH_NAME = "main"


class TwigConfig(BaseModel):
    default_branch: str = DEFAULT_BRANCH_NAME
    log_level: str = "WARNING"

    @field_validator("default_branch")
    @classmethod
    def _check_branch_name(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            raise ValueError("branch name must be non-empty and contain no whitespace")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_config(config_path: Path | None = None) -> TwigConfig:
    if config_path is None or not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return TwigConfig()
    parser = configparser.ConfigParser()
    parser.read(config_path)
    values = {}
    default_branch = parser.get("core", "default_branch", fallback=None)
    if default_branch is not None:
        values["default_branch"] = default_branch
    log_level = parser.get("log", "level", fallback=None)
    if log_level is not None:
        values["log_level"] = log_level
    logger.debug("Loaded config from %s: %s", config_path, values)
    return TwigConfig(**values)
