"""ContextVar-based configuration for the loxscan driver.

Provides context-local configuration using Python's ContextVars (PEP 567).
The scanner itself has no options; this covers how the host driver reads
files, prompts, and renders tokens.

Thread Safety:
    ContextVars are context-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from loxscan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(token_format="json")):
        run_file("script.lox")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

TOKEN_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable driver configuration.

    Attributes:
        prompt: Text written before each line in interactive mode
        token_format: "text" prints one token per line, "json" prints the
            serialized token list
        encoding: Codec used to decode script files

    """

    prompt: str = "> "
    token_format: str = "text"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.token_format not in TOKEN_FORMATS:
            msg = f"Unknown token_format {self.token_format!r}; expected one of {sorted(TOKEN_FORMATS)}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"prompt": "lox> ", "color": True})
            >>> config.prompt
            'lox> '

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
    """Get the active ScanConfig for this context."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set configuration for the current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(prompt="lox> ")):
        ...     get_scan_config().prompt
        'lox> '

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "TOKEN_FORMATS",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
