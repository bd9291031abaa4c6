"""
Centralized error handling utilities.

| Scenario | Use This |
|----------|----------|
| Config file syntax error | `ConfigFileInvalidError` |
| Config value invalid | `ConfigValidationError` (via `wrap_pydantic_error`) |
| GPIO driver missing | `GpioUnavailableError` |
| Show any error in the CLI | `format_error_for_display` |
"""

import logging
from typing import Optional

from .base import LedCycleError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> LedCycleError:
    """
    Convert Pydantic validation errors to ledcycle exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    if isinstance(error, ValidationError):
        errors = error.errors()

        # Invalid syntax (not JSON at all)
        if errors and errors[0].get("type") == "json_invalid":
            parse_error = errors[0].get("ctx", {}).get("error") or errors[0].get("msg", "")
            return ConfigFileInvalidError(file_path, str(parse_error))

        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return ConfigValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg", "validation failed"),
                file_path=file_path,
            )

        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path,
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=str(error),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for display to users.

    Args:
        error: The exception to format

    Returns:
        Tuple of (message, recovery_hint)
    """
    if isinstance(error, LedCycleError):
        return error.user_message, error.recovery_hint

    logger.debug(f"Formatting unexpected error for display: {error!r}")
    return f"Unexpected error: {error}", None
