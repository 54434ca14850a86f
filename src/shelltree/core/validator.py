from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration dictionaries coming from defaults, JSON files
and the CLI. Coerces types, injects missing keys and reports every
correction as a warning (or raises when strict).
"""

import logging
from typing import Any, Dict, List, Tuple

from shelltree.domain.config import get_default_config
from shelltree.infra.logging import LEVEL_NAMES

logger = logging.getLogger(__name__)

_INT_FIELDS = ["threshold", "total_capacity", "required_free"]
_BOOL_FIELDS = ["print_tree", "show_files"]
_STRING_FIELDS = ["log_level", "log_file"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: Wrong value type while strict.
        ValueError: Out-of-range value while strict.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown config key '{key}' ignored.")
        merged.pop(key)

    for key in _INT_FIELDS:
        merged[key] = _coerce_int(key, merged[key], defaults[key], strict, warnings)

    for key in _BOOL_FIELDS:
        merged[key] = _coerce_bool(key, merged[key], defaults[key], strict, warnings)

    for key in _STRING_FIELDS:
        value = merged[key]
        if value is None:
            merged[key] = defaults[key]
        elif not isinstance(value, str):
            msg = f"Invalid type for '{key}': expected str."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Using '{defaults[key]}'.")
            merged[key] = defaults[key]

    level = merged["log_level"].strip().upper()
    if level not in LEVEL_NAMES:
        msg = f"Unknown log level '{merged['log_level']}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{defaults['log_level']}'.")
        level = defaults["log_level"]
    merged["log_level"] = level

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _coerce_int(
        key: str, value: Any, default: int, strict: bool, warnings: List[str]
) -> int:
    """Accept non-negative ints and digit strings; bools are rejected."""
    if isinstance(value, bool):
        result = None
    elif isinstance(value, int):
        result = value
    elif isinstance(value, str) and value.strip().isdigit():
        result = int(value.strip())
    else:
        result = None

    if result is None:
        msg = f"Invalid type for '{key}': expected int, got {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using {default}.")
        return default

    if result < 0:
        msg = f"'{key}' must be non-negative, got {result}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using {default}.")
        return default

    return result


def _coerce_bool(
        key: str, value: Any, default: bool, strict: bool, warnings: List[str]
) -> bool:
    """Accept bools and the usual textual spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False

    msg = f"Invalid type for '{key}': expected bool."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using {default}.")
    return default
