"""Utility functions for linepool"""

import logging
import os


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Defaults used when the matching LINEPOOL_* variable is unset or invalid
DEFAULT_WORKERS = 5
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_REPORT_HEAD = 5
DEFAULT_ENCODING = 'utf-8'

# File list used when the CLI is given no files
DEFAULT_FILES = tuple(f'data{i}.txt' for i in range(1, 11))


def get_int_env(key: str, default: int = 0) -> int:
    """Get integer value from environment variable, return default if not set or invalid."""
    val = os.getenv(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        return default


def get_float_env(key: str, default: float) -> float:
    """Get float value from environment variable, return default if not set or invalid."""
    val = os.getenv(key)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        return default


def get_str_env(key: str, default: str) -> str:
    """
    Get string from environment variable, return default if not set.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        String value or default
    """
    return os.getenv(key, default)


def get_default_workers() -> int:
    """Worker count from LINEPOOL_WORKERS, falling back to DEFAULT_WORKERS for non-positive values."""
    workers = get_int_env('LINEPOOL_WORKERS', DEFAULT_WORKERS)
    return workers if workers > 0 else DEFAULT_WORKERS


def get_default_timeout() -> float:
    """Join barrier timeout in seconds from LINEPOOL_TIMEOUT."""
    timeout = get_float_env('LINEPOOL_TIMEOUT', DEFAULT_TIMEOUT_SECONDS)
    return timeout if timeout > 0 else DEFAULT_TIMEOUT_SECONDS


def get_default_report_head() -> int:
    head = get_int_env('LINEPOOL_REPORT_HEAD', DEFAULT_REPORT_HEAD)
    return head if head >= 0 else DEFAULT_REPORT_HEAD


def get_default_encoding() -> str:
    return get_str_env('LINEPOOL_ENCODING', DEFAULT_ENCODING)


def get_log_level(verbose: bool = False) -> int:
    """
    Resolve the logging level.

    --verbose always wins; otherwise LINEPOOL_LOG_LEVEL is used (INFO when
    unset or not a known level name).
    """
    if verbose:
        return logging.DEBUG
    log_level_name = get_str_env('LINEPOOL_LOG_LEVEL', 'INFO').upper()
    level = getattr(logging, log_level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(verbose: bool = False):
    """Configure root logging for CLI runs."""
    logging.basicConfig(level=get_log_level(verbose), format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist, keep the level in sync anyway
    logging.getLogger().setLevel(get_log_level(verbose))
