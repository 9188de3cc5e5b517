"""A widget that draws an image file inside its bounds."""

from __future__ import annotations

from enum import Enum, auto
from typing import Union

import pygame

from pushrod.render.widget import Widget
from pushrod.render.widget_config import (
    CONFIG_COLOR_BASE,
    CONFIG_IMAGE_POSITION,
    CONFIG_SIZE,
    CompassPosition,
    Config,
)


class ImagePosition(Enum):
    """Placement of an image within the bounds of a widget."""

    NW = auto()
    N = auto()
    NE = auto()
    W = auto()
    CENTER = auto()
    E = auto()
    SW = auto()
    S = auto()
    SE = auto()


_WEST = {"NW", "W", "SW"}
_EAST = {"NE", "E", "SE"}
_NORTH = {"NW", "N", "NE"}
_SOUTH = {"SW", "S", "SE"}


def _half_toward_zero(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def image_offset(
    position: Union[CompassPosition, ImagePosition],
    widget_w: int,
    widget_h: int,
    width: int,
    height: int,
) -> tuple[int, int]:
    """Return the (x, y) offset of a `width` x `height` image placed at `position`."""
    name = position.name
    if name in _WEST:
        x = 0
    elif name in _EAST:
        x = widget_w - width
    else:
        x = _half_toward_zero(widget_w - width)

    if name in _NORTH:
        y = 0
    elif name in _SOUTH:
        y = widget_h - height
    else:
        y = _half_toward_zero(widget_h - height)
    return x, y


class ImageWidget(Widget):
    """Draws the image at `image_name` over the base colour.

    When `scaled` is true the image is stretched to the widget bounds and the
    position is ignored; otherwise it is drawn at its own size, placed by the
    `CONFIG_IMAGE_POSITION` compass position.
    """

    def __init__(self, image_name: str, x: int, y: int, w: int, h: int, scaled: bool) -> None:
        super().__init__(x, y, w, h)
        self.image_name = image_name
        self.scaled = scaled

    def draw(self, canvas: pygame.Surface) -> None:
        canvas.fill(tuple(self.get_color(CONFIG_COLOR_BASE)), self.drawing_area())

        image = pygame.image.load(self.image_name)
        widget_w, widget_h = self.get_size(CONFIG_SIZE)

        if self.scaled:
            scaled = pygame.transform.scale(image, (widget_w, widget_h))
            canvas.blit(scaled, (self.config.to_x(0), self.config.to_y(0)))
            return

        width, height = image.get_size()
        dx, dy = image_offset(
            self.get_compass(CONFIG_IMAGE_POSITION), widget_w, widget_h, width, height
        )
        canvas.blit(image, (self.config.to_x(dx), self.config.to_y(dy)))

    def on_config_changed(self, key: int, value: Config) -> None:
        """Redraw only when the image position changes."""
        if key == CONFIG_IMAGE_POSITION:
            self.config.invalidated = True