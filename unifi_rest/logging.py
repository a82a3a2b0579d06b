import logging
import json
from typing import Any, Callable, Dict, Optional

# Printf-style log sink: sink("fetched %d sites", 3)
Logger = Callable[..., None]


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the appropriate name.

    Args:
        name: Optional specific logger name. If not provided, uses the package logger.

    Returns:
        A logger instance for the specified name
    """
    if name is None:
        return logging.getLogger("unifi_rest")
    elif name.startswith("unifi_rest"):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"unifi_rest.{name}")


def discard_logs(msg: str, *args: Any) -> None:
    """Default log sink. Drops every message."""


def logger_sink(logger: logging.Logger, level: int = logging.DEBUG) -> Logger:
    """
    Adapt a standard library logger to the printf-style sink signature.

    Args:
        logger: Logger that receives the messages.
        level: Level every message is emitted at. Default is DEBUG.

    Returns:
        A callable usable as ``Config.error_log`` or ``Config.debug_log``.
    """
    def sink(msg: str, *args: Any) -> None:
        logger.log(level, msg, *args)

    return sink


def log_extra_fields(
    logger: logging.Logger,
    obj_name: str,
    obj_id: str,
    extra_fields: Dict[str, Any],
    max_length: int = 300,
):
    """
    Log extra fields found in a decoded record using the provided logger.

    Args:
        logger: Logger to use
        obj_name: Name of the record type (e.g., 'Device', 'Site').
        obj_id: Identifier for the specific record (e.g., MAC address, site name).
        extra_fields: Dictionary of extra fields.
        max_length: Maximum length for field values in the log. Default is 300.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    if not extra_fields:
        logger.debug(f"No extra fields for {obj_name} {obj_id}")
        return

    truncated_fields = {}
    for key, value in extra_fields.items():
        if isinstance(value, (dict, list)):
            value_str = json.dumps(value, default=str)
            if len(value_str) > max_length:
                value_str = value_str[:max_length] + "... [truncated]"
            truncated_fields[key] = value_str
        elif isinstance(value, str) and len(value) > max_length:
            truncated_fields[key] = value[:max_length] + "... [truncated]"
        else:
            truncated_fields[key] = value

    logger.debug(
        f"Extra fields for {obj_name} {obj_id}: {json.dumps(truncated_fields, indent=2, default=str)}"
    )


def log_api_response(
    logger: logging.Logger,
    url: str,
    body: bytes,
    status_code: int,
    truncate: bool = True,
    max_length: int = 500,
):
    """
    Log a raw API response body using the provided logger.

    Args:
        logger: Logger to use
        url: The API URL that was called.
        body: The raw response body.
        status_code: HTTP status code.
        truncate: Whether to truncate large bodies. Default is True.
        max_length: Maximum length for the body in the log if truncated. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    response_str = body.decode("utf-8", errors="replace")
    if truncate and len(response_str) > max_length:
        response_str = response_str[:max_length] + "... [truncated]"

    logger.debug(
        f"API Response from {url} (Status: {status_code}):\n{response_str}"
    )
