"""ContextVar-based conversion configuration for Pasada.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Passes read the active config with get_convert_config(); callers set it
for a block of conversions with convert_config_context().

Configuration only tunes what a pass emits. It cannot skip or reorder
passes: the pipeline order is fixed.

Usage:
    from pasada import convert
    from pasada.config import ConvertConfig, convert_config_context

    with convert_config_context(ConvertConfig(escape_attributes=True)):
        html = convert('[x](" onclick="alert(1))')

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from pasada.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Attributes:
        escape_attributes: HTML-escape the href, src and alt attribute values.
            Link text is left as is. Off by default, which inserts the
            attribute values verbatim.
        list_indent_width: Indentation step of nested unordered lists. A
            dedent closes ``(previous - current) // list_indent_width`` lists.
        emoji_class: CSS class of the span wrapping an emoji.

    """

    escape_attributes: bool = False
    list_indent_width: int = 2
    emoji_class: str = "emoji"

    def __post_init__(self) -> None:
        if self.list_indent_width < 1:
            raise ConfigError("list_indent_width", f"must be >= 1, got {self.list_indent_width}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ConvertConfig":
        """Create ConvertConfig from dictionary.

        Only includes keys that are valid ConvertConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ConvertConfig.from_dict({
            ...     "escape_attributes": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.escape_attributes
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get current conversion configuration (thread-local)."""
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set conversion configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to default configuration."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with convert_config_context(ConvertConfig(list_indent_width=4)):
        ...     html = convert("- a\\n    - b\\n")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _convert_config.get()
    _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.set(previous)


__all__ = [
    "ConvertConfig",
    "get_convert_config",
    "set_convert_config",
    "reset_convert_config",
    "convert_config_context",
]
