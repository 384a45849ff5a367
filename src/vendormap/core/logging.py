"""
Logging configuration.

Handlers and formatters come from the packaged `config/logging.yaml`; the level
comes from settings (`app.log_level`, env `VENDORMAP_LOG_LEVEL`) unless the caller
passes one explicitly (the CLI's `--log-level`).
"""

from __future__ import annotations

import logging.config

from vendormap.config.settings import get_logging_config, get_settings


def configure_logging(level: str | None = None) -> str:
    """Apply the YAML logging config with a single effective level; returns that level."""
    config = get_logging_config()
    effective = (level or get_settings().app.log_level).upper()

    config.setdefault("root", {})["level"] = effective
    for logger_cfg in config.get("loggers", {}).values():
        if isinstance(logger_cfg, dict):
            logger_cfg["level"] = effective
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = effective

    logging.config.dictConfig(config)
    return effective
