"""ContextVar-based scan configuration for hscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read once per scan by the scan driver.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed. ``scan_files`` copies the caller's context into
    each worker so the batch sees the caller's config.

Usage:
    from hscan import scan_file
    from hscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(encoding="latin-1")):
        result = scan_file("Legacy.cpp")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        encoding: Text encoding used to decode files read by scan_file
        decode_errors: ``bytes.decode`` error handler for undecodable bytes
        strict: Raise ScanError on the first diagnostic instead of reporting it
        max_workers: Default thread count for scan_files (None = executor default)

    """

    encoding: str = "utf-8"
    decode_errors: str = "replace"
    strict: bool = False
    max_workers: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({"strict": True, "unknown_key": 1})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Example:
        >>> with scan_config_context(ScanConfig(strict=True)):
        ...     get_scan_config().strict
        True
        >>> get_scan_config().strict
        False

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
