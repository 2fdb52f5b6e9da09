"""Centralized configuration management for screenforge.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from screenforge.config import EnvVar, get_environment
    >>>
    >>> dark = get_environment(EnvVar.DARK_MODE)  # Returns bool: False
    >>> title = get_environment(EnvVar.APP_TITLE, override="Shop")

Environment Variable Categories:
    logging: Log verbosity
    codegen: Defaults for generated Flutter source
    sanitize: Defaults for ingesting generated element batches
    output: Where the CLI writes exported files
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_output_dir,
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_log_level",
    "get_output_dir",
    # Introspection
    "list_environment_variables",
]
