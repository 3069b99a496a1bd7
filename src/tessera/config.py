"""ContextVar-based builder configuration for Tessera.

Holds the defaults builders fall back to when a call omits them: the prefix
separator and the attribute keys read by merge_attributes(). Explicit
arguments always win over configuration.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from tessera import ClassBuilder
    from tessera.config import BuilderConfig, builder_config_context

    with builder_config_context(BuilderConfig(prefix_separator="__")):
        ClassBuilder().set_prefix("card").add("title").build()
        # 'card__title'

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder defaults.

    Attributes:
        prefix_separator: Separator used by set_prefix() when none is given
        class_key: Attribute key ClassBuilder.merge_attributes() reads
        style_key: Attribute key StyleBuilder.merge_attributes() reads

    """

    prefix_separator: str = "-"
    class_key: str = "class"
    style_key: str = "style"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuilderConfig":
        """Create BuilderConfig from dictionary.

        Only includes keys that are valid BuilderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> BuilderConfig.from_dict({"class_key": "cssClass", "x": 1}).class_key
            'cssClass'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Get current builder configuration for this thread/context."""
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set builder configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _builder_config.set(config)


def reset_builder_config() -> None:
    """Reset to default configuration."""
    _builder_config.set(_DEFAULT_CONFIG)


@contextmanager
def builder_config_context(config: BuilderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with builder_config_context(BuilderConfig(style_key="css")):
        ...     StyleBuilder().merge_attributes({"css": "color: red"}).build()
        'color: red;'

    """
    previous = _builder_config.get()
    _builder_config.set(config)
    try:
        yield
    finally:
        _builder_config.set(previous)


__all__ = [
    "BuilderConfig",
    "builder_config_context",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
