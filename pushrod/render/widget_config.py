"""Per-widget configuration store: typed values keyed by small integer keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator

CONFIG_COLOR_BASE = 0
"""Base fill colour of a widget in its unselected state."""

CONFIG_COLOR_HOVER = 1
"""Fill colour while the mouse hovers over a widget."""

CONFIG_COLOR_BORDER = 2
"""Colour of a widget's border."""

CONFIG_COLOR_TEXT = 3
"""Colour of text drawn inside a widget."""

CONFIG_COLOR_SELECTED = 4
"""Colour of a widget in its selected state."""

CONFIG_COLOR_SECONDARY = 5
"""Secondary colour, such as the fill of a progress bar."""

CONFIG_ORIGIN = 6
"""Point of origin of a widget on the screen."""

CONFIG_SIZE = 7
"""Width and height of a widget."""

CONFIG_BORDER_WIDTH = 8
"""Border width in pixels."""

CONFIG_TEXT = 9
"""Text displayed by a widget."""

CONFIG_PROGRESS = 10
"""Progress value, 0 to 100."""

CONFIG_IMAGE_POSITION = 11
"""Position of an image within the bounds of a widget."""

CONFIG_FONT_SIZE = 12
"""Font size of a text widget."""

CONFIG_SELECTED_STATE = 13
"""Selected state of a toggle button."""


class CompassPosition(Enum):
    """Placement of content within the bounds of a widget."""

    NW = auto()
    N = auto()
    NE = auto()
    W = auto()
    CENTER = auto()
    E = auto()
    SW = auto()
    S = auto()
    SE = auto()


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0-255: {channel}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


class ConfigKind(Enum):
    """The type of value held by a `Config` entry."""

    POINTS = auto()
    SIZE = auto()
    COLOR = auto()
    NUMERIC = auto()
    TEXT = auto()
    TOGGLE = auto()
    COMPASS_POSITION = auto()


@dataclass(frozen=True)
class Config:
    """A single typed configuration value."""

    kind: ConfigKind
    value: Any


def _check_size(w: int, h: int) -> None:
    if w < 0 or h < 0:
        raise ValueError(f"size must not be negative: {w}x{h}")


class WidgetConfig:
    """Configuration of a widget: typed values plus hidden, enabled and invalidated flags.

    A freshly made configuration is visible, enabled and invalidated, so that it
    is drawn on the first pass.
    """

    def __init__(self, x: int, y: int, w: int, h: int) -> None:
        _check_size(w, h)
        self.config: dict[int, Config] = {
            CONFIG_ORIGIN: Config(ConfigKind.POINTS, (x, y)),
            CONFIG_SIZE: Config(ConfigKind.SIZE, (w, h)),
            CONFIG_COLOR_BASE: Config(ConfigKind.COLOR, WHITE),
            CONFIG_BORDER_WIDTH: Config(ConfigKind.NUMERIC, 0),
        }
        self._hidden = False
        self._enabled = True
        self.invalidated = True

    @property
    def hidden(self) -> bool:
        """True when the widget is hidden from view."""
        return self._hidden

    @property
    def enabled(self) -> bool:
        """True when the widget accepts interaction."""
        return self._enabled

    def to_x(self, x: int) -> int:
        """Offset an X coordinate by the widget's origin."""
        return self.get_point(CONFIG_ORIGIN)[0] + x

    def to_y(self, y: int) -> int:
        """Offset a Y coordinate by the widget's origin."""
        return self.get_point(CONFIG_ORIGIN)[1] + y

    def enable(self) -> None:
        self._enabled = True
        self.invalidated = True

    def disable(self) -> None:
        self._enabled = False
        self.invalidated = True

    def hide(self) -> None:
        self._hidden = True
        self.invalidated = True

    def show(self) -> None:
        self._hidden = False
        self.invalidated = True

    def set_point(self, key: int, x: int, y: int) -> None:
        self.config[key] = Config(ConfigKind.POINTS, (x, y))

    def set_size(self, key: int, w: int, h: int) -> None:
        _check_size(w, h)
        self.config[key] = Config(ConfigKind.SIZE, (w, h))

    def set_color(self, key: int, color: Color) -> None:
        self.config[key] = Config(ConfigKind.COLOR, color)

    def set_numeric(self, key: int, value: int) -> None:
        self.config[key] = Config(ConfigKind.NUMERIC, int(value))

    def set_text(self, key: int, text: str) -> None:
        self.config[key] = Config(ConfigKind.TEXT, str(text))

    def set_toggle(self, key: int, flag: bool) -> None:
        self.config[key] = Config(ConfigKind.TOGGLE, bool(flag))

    def set_compass(self, key: int, value: CompassPosition) -> None:
        self.config[key] = Config(ConfigKind.COMPASS_POSITION, value)

    def _lookup(self, key: int, kind: ConfigKind, default: Any) -> Any:
        entry = self.config.get(key)
        if entry is not None and entry.kind is kind:
            return entry.value
        return default

    def get_point(self, key: int) -> tuple[int, ...]:
        """Return the point for `key`, or an empty tuple if not set."""
        return self._lookup(key, ConfigKind.POINTS, ())

    def get_size(self, key: int) -> tuple[int, ...]:
        """Return the size for `key`, or an empty tuple if not set."""
        return self._lookup(key, ConfigKind.SIZE, ())

    def get_color(self, key: int) -> Color:
        """Return the colour for `key`, or white if not set."""
        return self._lookup(key, ConfigKind.COLOR, WHITE)

    def get_numeric(self, key: int) -> int:
        """Return the number for `key`, or 0 if not set."""
        return self._lookup(key, ConfigKind.NUMERIC, 0)

    def get_text(self, key: int) -> str:
        """Return the text for `key`, or an empty string if not set."""
        return self._lookup(key, ConfigKind.TEXT, "")

    def get_toggle(self, key: int) -> bool:
        """Return the toggle for `key`, or False if not set."""
        return self._lookup(key, ConfigKind.TOGGLE, False)

    def get_compass(self, key: int) -> CompassPosition:
        """Return the compass position for `key`, or W if not set."""
        return self._lookup(key, ConfigKind.COMPASS_POSITION, CompassPosition.W)