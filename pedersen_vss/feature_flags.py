"""
Feature flags for selecting where the second generator `h` comes from.

WARNING: the "local" mode lets a single party derive `h`, which breaks the
binding property against that party. Deployments with mutually distrusting
committers should run in "external" mode.
"""

from __future__ import annotations

import os
from typing import Final

from .config import DEFAULT_H_SOURCE_MODE, H_SOURCE_ENV_VAR, H_SOURCE_MODES
from .exceptions import ConfigurationError

_VALID_MODES: Final[tuple[str, ...]] = H_SOURCE_MODES
_DEFAULT_MODE: Final[str] = DEFAULT_H_SOURCE_MODE
_ENV_VAR_NAME: Final[str] = H_SOURCE_ENV_VAR

_mode_override: str | None = None


def _format_valid_options() -> str:
    return ", ".join(_VALID_MODES)


def _normalize_mode(value: str | None) -> str | None:
    if value is None:
        return None

    if not isinstance(value, str):
        raise ConfigurationError(
            f"Invalid h source mode: {value!r}. Valid options: {_format_valid_options()}"
        )

    value = value.strip().lower()
    if value == "":
        return None

    if value not in _VALID_MODES:
        raise ConfigurationError(
            f"Invalid h source mode: {value!r}. Valid options: {_format_valid_options()}"
        )

    return value


def get_h_source_mode(prefer: str | None = None) -> str:
    """
    Resolve the h source mode in precedence order.

    Explicit argument, then in-memory override, then the
    PEDERSEN_VSS_H_SOURCE environment variable, then the default.

    Args:
        prefer: Optional preferred mode.

    Returns:
        Mode string ("local" or "external").

    Raises:
        ConfigurationError: If a provided mode value is invalid.
    """
    preferred = _normalize_mode(prefer)
    if preferred is not None:
        return preferred

    if _mode_override is not None:
        return _mode_override

    env_mode = _normalize_mode(os.getenv(_ENV_VAR_NAME))
    if env_mode is not None:
        return env_mode

    return _DEFAULT_MODE


def set_h_source_mode(value: str | None) -> None:
    """
    Set in-memory mode override (testing only).

    Args:
        value: Mode to force, or None to clear the override.

    Raises:
        ConfigurationError: If the value is invalid.
    """
    global _mode_override
    _mode_override = _normalize_mode(value)
