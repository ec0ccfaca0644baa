import asyncio
import json
import logging
import logging.handlers
import os
import sys
import traceback
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, TypeVar

import click

from cognito_auth.config.models import LoggingConfigModel


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Get a boolean flag from an environment variable.

    Args:
        env_var: Name of the environment variable
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
        False otherwise
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def configure_logging(
    debug: bool = False,
    log_file: Path | None = None,
    log_level: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging (overrides log_level if True)
        log_file: Optional path to log file for persistent logging
        log_level: Log level string ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        max_bytes: Maximum log file size in bytes before rotation (default: 10MB)
        backup_count: Number of rotated log files to keep (default: 5)
    """
    if not debug:
        debug = get_env_flag("COGNITO_AUTH_DEBUG")

    if debug:
        level = logging.DEBUG
    elif log_level:
        level = getattr(logging, log_level.upper(), logging.WARNING)
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")

    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(detailed_formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            print(f"Warning: Failed to setup file logging to {log_file}: {e}", file=sys.stderr)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(simple_formatter)
    root_logger.addHandler(stream_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def configure_logging_from_config(logging_config: LoggingConfigModel, debug: bool = False) -> None:
    """Configure logging from the ``logging`` section of the config file.

    This is the canonical way to setup logging for all CLI commands.
    """
    if not logging_config.enabled:
        configure_logging(debug=debug)
        return

    configure_logging(
        debug=debug,
        log_file=Path(logging_config.path) if logging_config.path else None,
        log_level=logging_config.level,
        max_bytes=logging_config.max_bytes,
        backup_count=logging_config.backup_count,
    )


def format_error(error: Exception, debug: bool = False) -> dict[str, Any]:
    """Format an error for output.

    Args:
        error: The exception that occurred
        debug: Whether to include debug information

    Returns:
        Dict containing error information
    """
    error_info = {"error": str(error)}

    if debug:
        error_info["traceback"] = traceback.format_exc()
        error_info["type"] = error.__class__.__name__

    return error_info


def output_result(result: Any, json_output: bool = False) -> None:
    """Output a result in either JSON or human-readable format."""
    if json_output:
        click.echo(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    elif isinstance(result, dict):
        for key, value in result.items():
            click.echo(f"{key}: {value}")
    else:
        click.echo(result)


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Output an error in either JSON or human-readable format.

    Args:
        error: The exception that occurred
        json_output: Whether to output in JSON format
        debug: Whether to include debug information
    """
    error_info = format_error(error, debug)

    if json_output:
        click.echo(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if debug and "traceback" in error_info:
            click.echo("\nTraceback:", err=True)
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()


T = TypeVar("T")


def run_async_cli(coro: Coroutine[Any, Any, T]) -> T:
    """Execute an async CLI implementation from a synchronous entrypoint.

    Args:
        coro: The coroutine to run.

    Returns:
        The result of the coroutine.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    coro.close()
    raise RuntimeError("Cannot run CLI coroutine while an event loop is already running.")
