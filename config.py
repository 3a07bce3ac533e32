"""
Configuration management for the application, loading settings from environment variables with support for defaults, type conversion, and validation. This module defines a `Config` class holding server settings, the external base URL that alert links are built from, and the directory notification templates are loaded from.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _env_name() -> str:
    return (os.getenv("APP_ENV") or os.getenv("ENVIRONMENT") or "development").strip().lower()


def _is_production_env() -> bool:
    return _env_name() in {"prod", "production"}


class Config:
    def __init__(self) -> None:
        self.APP_ENV: str = _env_name()
        self.IS_PRODUCTION: bool = _is_production_env()

        # Server configuration
        self.HOST: str = os.getenv("HOST", "127.0.0.1")
        self.PORT: int = int(os.getenv("PORT", "4321"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info").strip().lower()
        self.ENABLE_API_DOCS: bool = _to_bool(os.getenv("ENABLE_API_DOCS"), default=not self.IS_PRODUCTION)

        # Base for dashboard, panel and silence links; parsed when alerts are extended
        self.EXTERNAL_URL: str = os.getenv("EXTERNAL_URL", "").strip()
        self.TEMPLATES_DIR: str = os.getenv("TEMPLATES_DIR", "templates")

        self.validate()

    def validate(self) -> None:
        if self.LOG_LEVEL not in _LOG_LEVELS:
            raise ValueError(f"Unsupported LOG_LEVEL '{self.LOG_LEVEL}'. Allowed values: {sorted(_LOG_LEVELS)}")

        if not (1 <= self.PORT <= 65535):
            raise ValueError("PORT must be between 1 and 65535")

        if self.IS_PRODUCTION and not self.EXTERNAL_URL:
            logger.warning("EXTERNAL_URL is not set; notifications will carry no dashboard or silence links")


class Constants:
    STATUS_HEALTHY: str = "healthy"


config = Config()
constants = Constants()
