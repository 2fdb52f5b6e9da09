"""Environment configuration for screenforge.

Every setting the CLI reads from the environment is declared once as an
``EnvVar`` member carrying its variable name, default, value type and a
category. ``get_environment()`` resolves a member as
override > environment > default and converts the raw string.

Example:
    >>> from screenforge.config import EnvVar, get_environment
    >>>
    >>> prefix = get_environment(EnvVar.ID_PREFIX)  # "element"
    >>> dark = get_environment(EnvVar.DARK_MODE, override=True)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, overload

from screenforge.core.log import get_logger, parse_level

logger = get_logger(__name__)

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "SCREENFORGE_DARK_MODE").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by screenforge.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="SCREENFORGE_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level name (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )

    # -------------------------------------------------------------------------
    # Code generation
    # -------------------------------------------------------------------------
    DARK_MODE = EnvConfig(
        name="SCREENFORGE_DARK_MODE",
        default=False,
        var_type=bool,
        description="Emit the dark theme variant when the CLI is not told otherwise",
        category="codegen",
    )
    APP_TITLE = EnvConfig(
        name="SCREENFORGE_APP_TITLE",
        default="Flutter UI App",
        var_type=str,
        description="MaterialApp title used in generated source",
        category="codegen",
    )

    # -------------------------------------------------------------------------
    # Sanitizer
    # -------------------------------------------------------------------------
    ID_PREFIX = EnvConfig(
        name="SCREENFORGE_ID_PREFIX",
        default="element",
        var_type=str,
        description="Prefix for ids assigned to sanitized elements",
        category="sanitize",
    )

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    OUTPUT_DIR = EnvConfig(
        name="SCREENFORGE_OUTPUT_DIR",
        default=None,
        var_type=Path,
        description="Directory the CLI writes generated files to",
        category="output",
    )


# =============================================================================
# Value Conversion
# =============================================================================

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


def _to_bool(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: lambda raw: int(raw.strip()),
    bool: _to_bool,
    Path: lambda raw: Path(raw).expanduser(),
}


def _convert_value(raw: str | None, config: EnvConfig) -> Any:
    """Convert a raw environment string to the variable's declared type.

    Unset variables and values that do not convert yield the default.
    """
    if raw is None:
        return config.default

    converter = _CONVERTERS.get(config.var_type, str)
    try:
        return converter(raw)
    except ValueError:
        logger.warning(
            f"Ignoring {config.name}={raw!r}: expected {config.var_type.__name__}"
        )
        return config.default


# =============================================================================
# Lookup
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Resolve a configuration value.

    An explicit override wins, then the process environment, then the
    declared default.

    Args:
        env_var: Variable to resolve.
        override: Value supplied by the caller, e.g. a CLI flag.

    Returns:
        The value, typed per the variable's ``var_type``.

    Example:
        >>> get_environment(EnvVar.APP_TITLE)
        'Flutter UI App'
    """
    if override is not None:
        return override
    config: EnvConfig = env_var.value
    return _convert_value(os.environ.get(config.name), config)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Return the declaration behind an ``EnvVar`` member."""
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_log_level(override: str | None = None) -> int:
    """Get the numeric log level from SCREENFORGE_LOG_LEVEL."""
    return parse_level(get_environment(EnvVar.LOG_LEVEL, override=override))


def get_output_dir(override: Path | str | None = None) -> Path:
    """Get the directory for exported files.

    Resolution: override > SCREENFORGE_OUTPUT_DIR > current directory
    """
    if override is not None:
        return Path(override)

    env_path = get_environment(EnvVar.OUTPUT_DIR)
    if env_path:
        return env_path

    return Path.cwd()


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (logging, codegen, sanitize, output).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_environment_info",
    "get_log_level",
    "get_output_dir",
    "list_environment_variables",
]
