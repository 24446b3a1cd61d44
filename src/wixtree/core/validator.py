from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (JSON files, CLI overrides) into the
typed values the pipeline expects, filling gaps with defaults.
"""

import logging
from typing import Any, Dict, List, Tuple

from wixtree.domain.config import get_default_config

logger = logging.getLogger(__name__)

STRING_FIELDS = [
    "dirs_file", "files_file", "root", "version",
    "executable_name", "stub_executable_path", "updater_path",
]

BOOL_FIELDS = ["auto_update", "strict"]

# Fields that must be non-empty before a build can run
REQUIRED_FIELDS = [
    "dirs_file", "files_file", "root", "version",
    "executable_name", "stub_executable_path",
]


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
        strict: If True, raise TypeError on type mismatch instead of
                coercing to the default.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and
                                          warnings produced on the way.
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

    for field in STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    return merged, warnings


def missing_required(config: Dict[str, Any]) -> List[str]:
    """Return the required fields that are empty in *config*."""
    return [f for f in REQUIRED_FIELDS if not config.get(f)]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Accept real booleans and the usual string spellings."""
    if value is None:
        return fallback
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("1", "true", "yes", "on"):
            return True
        if v in ("0", "false", "no", "off"):
            return False
    if isinstance(value, int):
        return bool(value)

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
