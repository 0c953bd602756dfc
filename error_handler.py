"""
Standardized error handling utilities for consistent error management.

Two kinds of failure exist in the table engine:

- ConfigurationError: a page built its columns, buttons, behaviors or forms
  incorrectly. Raised at construction time.
- StructuralRenderError: the rows handed to a table do not have the shape the
  table needs. Raised while rendering; a partially rendered table is never
  returned.
"""

import os
from typing import Optional, Any, Callable, Mapping
from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)


class DataTableError(Exception):
    """Base exception for all data table errors."""
    pass


class ConfigurationError(DataTableError, ValueError):
    """Invalid table, column, button, widget or behavior configuration."""
    pass


class StructuralRenderError(DataTableError):
    """Row data does not match the structure the table expects."""
    pass


def require_string(value: Any, name: str, allow_empty: bool = False) -> str:
    """
    Validate that a configuration value is a (non-empty) string.

    Args:
        value: The value to check
        name: Name used in the error message
        allow_empty: Accept empty or whitespace-only strings

    Returns:
        The value, unchanged

    Raises:
        ConfigurationError: if the value is not an acceptable string
    """
    if not isinstance(value, str):
        raise ConfigurationError(f"{name} must be a string")
    if not allow_empty and value.strip() == '':
        raise ConfigurationError(f"{name} must be a non-empty string")
    return value


def require_params(params: Any, name: str) -> dict:
    """
    Validate a mapping of extra parameters: every key a non-empty string.

    Returns:
        A shallow copy of the mapping as a plain dict

    Raises:
        ConfigurationError: if params is not a mapping or has a bad key
    """
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise ConfigurationError(f"{name} must be a mapping")
    for key in params:
        if not isinstance(key, str) or key.strip() == '':
            raise ConfigurationError(f"Each key in {name} must be a non-empty string")
    return dict(params)


def validate_environment_variable(
    var_name: str,
    default: Any,
    validator: Optional[Callable[[Any], bool]] = None,
    converter: Optional[Callable[[str], Any]] = None
) -> Any:
    """
    Safely get and validate an environment variable.

    Args:
        var_name: Name of the environment variable
        default: Default value if not set or invalid
        validator: Optional validation function
        converter: Optional conversion function (e.g., int, float)

    Returns:
        The validated and converted environment variable value
    """
    raw_value = os.getenv(var_name)

    if raw_value is None:
        logger.debug(f"Environment variable {var_name} not set, using default: {default}")
        return default

    # Try to convert the value
    if converter:
        try:
            value = converter(raw_value)
        except (ValueError, TypeError) as exc:
            logger.warning(
                f"Invalid {var_name}='{raw_value}': {exc}. Using default: {default}"
            )
            return default
    else:
        value = raw_value

    # Validate the converted value
    if validator and not validator(value):
        logger.warning(
            f"Invalid {var_name}='{value}' failed validation. Using default: {default}"
        )
        return default

    logger.debug(f"Using {var_name}={value}")
    return value
