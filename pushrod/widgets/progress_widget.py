"""A widget that draws a progress bar."""

from __future__ import annotations

import pygame

from pushrod.render.widget import BaseWidget, Widget
from pushrod.render.widget_config import (
    BLACK,
    CONFIG_BORDER_WIDTH,
    CONFIG_COLOR_BASE,
    CONFIG_COLOR_BORDER,
    CONFIG_COLOR_SECONDARY,
    CONFIG_PROGRESS,
    CONFIG_SIZE,
    WHITE,
    Config,
)


class ProgressWidget(Widget):
    """A bordered box filled from the left in proportion to `CONFIG_PROGRESS` (0 to 100).

    The box is white with a one-pixel black border; the fill uses
    `CONFIG_COLOR_SECONDARY`.
    """

    def __init__(self, x: int, y: int, w: int, h: int) -> None:
        super().__init__(x, y, w, h)
        self.base_widget = BaseWidget(x, y, w, h)
        self.base_widget.config.set_color(CONFIG_COLOR_BASE, WHITE)
        self.base_widget.config.set_color(CONFIG_COLOR_BORDER, BLACK)
        self.base_widget.config.set_numeric(CONFIG_BORDER_WIDTH, 1)

    def progress_width(self) -> int:
        """Return the width in pixels of the filled part of the bar."""
        width = self.get_size(CONFIG_SIZE)[0]
        return max(0, int(width * (self.get_numeric(CONFIG_PROGRESS) / 100.0)))

    def draw(self, canvas: pygame.Surface) -> None:
        self.base_widget.draw(canvas)
        height = max(0, self.get_size(CONFIG_SIZE)[1] - 2)
        rect = pygame.Rect(
            self.config.to_x(1), self.config.to_y(1), self.progress_width(), height
        )
        canvas.fill(tuple(self.get_color(CONFIG_COLOR_SECONDARY)), rect)

    def on_config_changed(self, key: int, value: Config) -> None:
        """Redraw only when the progress value changes."""
        if key == CONFIG_PROGRESS:
            self.config.invalidated = True