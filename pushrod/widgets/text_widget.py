"""A widget that draws a block of wrapped text inside its bounds."""

from __future__ import annotations

from enum import Enum, Flag, auto
from typing import Optional

import pygame

from pushrod.render.widget import Widget
from pushrod.render.widget_config import (
    CONFIG_BORDER_WIDTH,
    CONFIG_COLOR_BASE,
    CONFIG_COLOR_TEXT,
    CONFIG_FONT_SIZE,
    CONFIG_SIZE,
    CONFIG_TEXT,
    Color,
    Config,
    ConfigKind,
)


class TextJustify(Enum):
    """Horizontal placement of text within the bounds of a widget."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class FontStyle(Flag):
    """Font style flags; combine them with ``|``."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4
    STRIKETHROUGH = 8


def _half_toward_zero(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def text_x_offset(justification: TextJustify, widget_width: int, text_width: int) -> int:
    """Return the X offset of text of `text_width` inside a widget `widget_width` wide."""
    if justification is TextJustify.LEFT:
        return 0
    if justification is TextJustify.RIGHT:
        return widget_width - text_width
    return _half_toward_zero(widget_width - text_width)


def _wrap_lines(font: pygame.font.Font, text: str, max_width: int) -> list[str]:
    """Break `text` at spaces so that each line fits in `max_width` where possible."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}" if current else word
            if current and font.size(candidate)[0] > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


class TextWidget(Widget):
    """Draws `msg` in the given font, wrapped to the widget width and justified.

    The text colour is `CONFIG_COLOR_TEXT` and the background `CONFIG_COLOR_BASE`.
    A `font_name` of None selects pygame's default font.
    """

    def __init__(
        self,
        font_name: Optional[str],
        font_style: FontStyle,
        font_size: int,
        justification: TextJustify,
        msg: str,
        x: int,
        y: int,
        w: int,
        h: int,
    ) -> None:
        super().__init__(x, y, w, h)
        self.font_name = font_name
        self.font_style = font_style
        self.font_size = font_size
        self.justification = justification
        self.msg = msg

    def _load_font(self) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(self.font_name, self.font_size)
        font.set_bold(FontStyle.BOLD in self.font_style)
        font.set_italic(FontStyle.ITALIC in self.font_style)
        font.set_underline(FontStyle.UNDERLINE in self.font_style)
        font.set_strikethrough(FontStyle.STRIKETHROUGH in self.font_style)
        return font

    def _render_text(self, font: pygame.font.Font, color: Color, max_width: int) -> pygame.Surface:
        rendered = [
            font.render(line, True, tuple(color))
            for line in _wrap_lines(font, self.msg, max_width)
        ]
        line_height = font.get_linesize()
        width = max(surface.get_width() for surface in rendered)
        height = line_height * len(rendered)
        text_surface = pygame.Surface((max(width, 1), max(height, 1)), pygame.SRCALPHA)
        for row, surface in enumerate(rendered):
            text_surface.blit(surface, (0, row * line_height))
        return text_surface

    def draw(self, canvas: pygame.Surface) -> None:
        base_color = self.get_color(CONFIG_COLOR_BASE)
        widget_w = self.get_size(CONFIG_SIZE)[0]
        max_width = max(0, widget_w - self.get_numeric(CONFIG_BORDER_WIDTH) * 2)

        font = self._load_font()
        text_surface = self._render_text(font, self.get_color(CONFIG_COLOR_TEXT), max_width)

        text_x = self.config.to_x(
            text_x_offset(self.justification, widget_w, text_surface.get_width())
        )
        text_y = self.config.to_y(0)

        canvas.fill(tuple(base_color), self.drawing_area())
        canvas.blit(text_surface, (text_x, text_y))

    def on_config_changed(self, key: int, value: Config) -> None:
        """Redraw on colour, text or font size changes, tracking the new text and size."""
        if key in (CONFIG_COLOR_TEXT, CONFIG_COLOR_BASE):
            self.config.invalidated = True
        elif key == CONFIG_FONT_SIZE and value.kind is ConfigKind.NUMERIC:
            self.font_size = value.value
            self.config.invalidated = True
        elif key == CONFIG_TEXT and value.kind is ConfigKind.TEXT:
            self.msg = value.value
            self.config.invalidated = True