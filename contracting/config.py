"""Configuration management for the Contracting Management API.

Loads from YAML config file with environment variable overrides.
Pattern: CONFIG__{SECTION}__{KEY} overrides nested YAML keys.
Example: CONFIG__STORE__SEED_DEMO_DATA=false
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=4000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class StoreConfig(BaseModel):
    backend: str = "memory"  # only in-memory today; state is lost on restart
    seed_demo_data: bool = True


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    log_requests: bool = True


class ServiceConfig(BaseModel):
    server: ServerConfig = ServerConfig()
    store: StoreConfig = StoreConfig()
    logging: LoggingConfig = LoggingConfig()


def _apply_env_overrides(config_dict: dict, prefix: str = "CONFIG") -> dict:
    """Apply environment variable overrides to config dict.

    Pattern: CONFIG__SECTION__KEY=value maps to config[section][key] = value
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}__"):
            continue
        parts = key[len(prefix) + 2 :].lower().split("__")
        target = config_dict
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        # Type coercion for common cases
        if value.lower() in ("true", "false"):
            value = value.lower() == "true"
        elif value.isdigit():
            value = int(value)
        target[parts[-1]] = value
    return config_dict


def load_config(
    config_path: Optional[str] = None,
) -> ServiceConfig:
    """Load configuration from YAML file with env overrides.

    Priority: env vars > YAML file > defaults
    """
    config_dict = {}

    # 1. Load YAML if exists
    if config_path is None:
        config_path = os.getenv("CONFIG_PATH", "config/contracting.yml")
    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            config_dict = yaml.safe_load(f) or {}

    # 2. Apply env overrides
    config_dict = _apply_env_overrides(config_dict)

    # 3. Common deployment variables
    config_dict.setdefault("server", {})
    if os.getenv("PORT"):
        config_dict["server"]["port"] = int(os.environ["PORT"])
    config_dict.setdefault("logging", {})
    if os.getenv("LOG_LEVEL"):
        config_dict["logging"]["level"] = os.environ["LOG_LEVEL"]

    return ServiceConfig(**config_dict)


def setup_logging(config: ServiceConfig) -> None:
    logging.basicConfig(
        level=config.logging.level.upper(),
        format=config.logging.format,
    )


# Singleton for the service
_config: Optional[ServiceConfig] = None


def get_config() -> ServiceConfig:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Optional[str] = None) -> ServiceConfig:
    global _config
    _config = load_config(config_path)
    return _config
