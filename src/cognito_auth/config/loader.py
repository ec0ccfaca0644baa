"""Configuration loader for cognito-auth.

Loads the YAML configuration file, resolves ``${VAR}`` environment references
and validates the result into an ``AppConfigModel``.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import AppConfigModel

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "COGNITO_AUTH_CONFIG"
DEFAULT_CONFIG_NAME = "cognito-auth.yml"

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z0-9_]+)\}")


def load_config(config_path: Path | None = None) -> AppConfigModel:
    """Load configuration from a YAML file.

    Args:
        config_path: Optional path to the config file.
                    If not provided, looks for:
                    1. COGNITO_AUTH_CONFIG environment variable
                    2. ./cognito-auth.yml

    Returns:
        AppConfigModel with provider and logging settings

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        ValueError: If the config is invalid or references an unset variable
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            config_path = Path(env_path)
        else:
            candidate = Path.cwd() / DEFAULT_CONFIG_NAME
            if not candidate.exists():
                logger.info("No config file found, using default configuration")
                return AppConfigModel()
            config_path = candidate

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at {config_path}")

    logger.debug(f"Loading config from: {config_path}")

    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML config file {config_path}: {e}") from e

    if not raw_config:
        logger.info("Empty config file, using default configuration")
        return AppConfigModel()

    if not isinstance(raw_config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    try:
        return AppConfigModel.model_validate(interpolate_env(raw_config))
    except ValidationError as e:
        raise ValueError(f"Invalid config: {e}") from e


def interpolate_env(value: Any) -> Any:
    """Recursively replace ``${VAR}`` references with environment values.

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, dict):
        return {k: interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [interpolate_env(v) for v in value]
    if isinstance(value, str):
        return ENV_VAR_PATTERN.sub(_env_lookup, value)
    return value


def _env_lookup(match: re.Match[str]) -> str:
    var_name = match.group(1)
    env_value = os.environ.get(var_name)
    if env_value is None:
        raise ValueError(f"Environment variable not found: {var_name}")
    return env_value
