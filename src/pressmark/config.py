"""ContextVar-based layout configuration for pressmark.

Provides the static page geometry and typography settings a LayoutModel
is built from. Config is set once per Typesetter call and read by the
layout and renderer in the same context.

Usage:
    # Direct construction
    from pressmark.config import LayoutConfig, layout_config_context

    with layout_config_context(LayoutConfig(body_size=11, profile="loose")):
        output = render(parse(source))

    # From a TOML file
    config = load_config_file("pressmark.toml")

"""

from __future__ import annotations

import string
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pressmark.utils.text import is_ps_name

# Paragraph pad as a multiple of the body size
PROFILES: dict[str, float] = {
    "standard": 1.5,
    "loose": 1.75,
}

# Printable ASCII without the space
DEFAULT_KERN_CHARSET = string.ascii_letters + string.digits + string.punctuation

_SIZE_FIELDS = ("page_width", "page_height", "body_size", "head_size")
_MARGIN_FIELDS = ("vertical_margin", "horizontal_margin")
_TEXT_FIELDS = ("profile", "font_name", "kern_charset")


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable layout configuration.

    Sizes are in PostScript points. The defaults describe US Letter paper
    with one-inch margins.

    Attributes:
        page_width: Page width
        page_height: Page height
        vertical_margin: Top and bottom margin
        horizontal_margin: Left and right margin
        body_size: Body text font size
        head_size: Heading font size
        profile: Paragraph spacing profile, a key of PROFILES
        font_name: Logical font name used when no font file is loaded
        kern_charset: Characters whose ordered pairs are kerned

    """

    page_width: float = 612
    page_height: float = 792
    vertical_margin: float = 72
    horizontal_margin: float = 72
    body_size: float = 12
    head_size: float = 13
    profile: str = "standard"
    font_name: str = "GoRegular"
    kern_charset: str = DEFAULT_KERN_CHARSET

    def __post_init__(self) -> None:
        for name in _SIZE_FIELDS + _MARGIN_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass but never a size
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, not {type(value).__name__}")
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string, not {type(value).__name__}")

        for name in _SIZE_FIELDS:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in _MARGIN_FIELDS:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.profile not in PROFILES:
            known = ", ".join(sorted(PROFILES))
            raise ValueError(f"unknown profile {self.profile!r} (expected one of: {known})")
        if not is_ps_name(self.font_name):
            raise ValueError(
                f"font_name {self.font_name!r} is not a PostScript name"
                " (printable ASCII without spaces or ()<>[]{}/%)"
            )

    @property
    def body_pad_ratio(self) -> float:
        """Paragraph pad multiplier for the configured profile."""
        return PROFILES[self.profile]

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> LayoutConfig:
        """Create LayoutConfig from dictionary.

        Only includes keys that are valid LayoutConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LayoutConfig.from_dict({"body_size": 10, "color": "red"}).body_size
            10

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def load_config_file(path: str | Path) -> LayoutConfig:
    """Read a LayoutConfig from a TOML file.

    Settings are taken from a ``[layout]`` table when present, otherwise
    from the top level of the document.

    Raises:
        OSError: If the file cannot be read
        tomllib.TOMLDecodeError: If the file is not valid TOML
    """
    with Path(path).open("rb") as f:
        data = tomllib.load(f)
    section = data.get("layout", data)
    return LayoutConfig.from_dict(section)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LayoutConfig = LayoutConfig()

_layout_config: ContextVar[LayoutConfig] = ContextVar(
    "layout_config",
    default=_DEFAULT_CONFIG,
)


def get_layout_config() -> LayoutConfig:
    """Get current layout configuration for this context."""
    return _layout_config.get()


def set_layout_config(config: LayoutConfig) -> None:
    """Set layout configuration for the current context."""
    _layout_config.set(config)


def reset_layout_config() -> None:
    """Reset to default configuration."""
    _layout_config.set(_DEFAULT_CONFIG)


@contextmanager
def layout_config_context(config: LayoutConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with layout_config_context(LayoutConfig(body_size=10)):
        ...     get_layout_config().body_size
        10

    """
    previous = _layout_config.get()
    _layout_config.set(config)
    try:
        yield
    finally:
        _layout_config.set(previous)


__all__ = [
    "DEFAULT_KERN_CHARSET",
    "PROFILES",
    "LayoutConfig",
    "get_layout_config",
    "layout_config_context",
    "load_config_file",
    "reset_layout_config",
    "set_layout_config",
]
