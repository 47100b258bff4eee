"""ContextVar-based render configuration for chatmark.

Config is set once per Chatmark instance and read by the tokenizer and the
resolver for the duration of a call.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so concurrent callers with different configs never see each other's values.

Usage:
    # In the Chatmark class
    cm = Chatmark(config=RenderConfig(role_suffix_length=6))
    doc = cm.parse("<@&1234567>")  # Sets config internally via ContextVar

    # Direct pipeline usage
    with render_config_context(RenderConfig(link_schemes=("https://",))):
        tokens = tokenize("[docs](http://example.com)")

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

from chatmark.errors import ConfigError


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        user_fallback_template: Label for a user id missing from the lookup.
            ``{id}`` is replaced by the user id.
        role_fallback_template: Label for a role id missing from the lookup.
            ``{id}`` is the full role id, ``{suffix}`` its trailing characters.
        role_suffix_length: Number of trailing role id characters in ``{suffix}``
        link_schemes: URL prefixes a ``[label](url)`` link must start with

    """

    user_fallback_template: str = "User {id}"
    role_fallback_template: str = "group-{suffix}"
    role_suffix_length: int = 4
    link_schemes: tuple[str, ...] = ("http://", "https://")

    def __post_init__(self) -> None:
        if self.role_suffix_length < 1:
            raise ConfigError("role_suffix_length", f"must be >= 1, got {self.role_suffix_length}")
        if not self.link_schemes:
            raise ConfigError("link_schemes", "at least one scheme is required")
        if any(not scheme for scheme in self.link_schemes):
            raise ConfigError("link_schemes", "schemes must be non-empty strings")
        # Templates may only reference {id} and {suffix}
        for name in ("user_fallback_template", "role_fallback_template"):
            try:
                getattr(self, name).format(id="0", suffix="0")
            except (AttributeError, KeyError, IndexError, ValueError) as e:
                raise ConfigError(name, f"invalid template: {e}") from e

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a dictionary.

        Unknown keys are ignored. Lists are accepted for ``link_schemes``.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "role_suffix_length": 6,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.role_suffix_length
            6

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "link_schemes" in filtered:
            filtered["link_schemes"] = tuple(filtered["link_schemes"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the active render configuration for this thread/context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(role_suffix_length=2)):
        ...     get_render_config().role_suffix_length
        2

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
