"""Widget base class and the plain background/border widget."""

from __future__ import annotations

from typing import Any, Sequence

import pygame

from pushrod.render.callbacks import CallbackRegistry
from pushrod.render.widget_config import (
    CONFIG_BORDER_WIDTH,
    CONFIG_COLOR_BASE,
    CONFIG_COLOR_BORDER,
    CONFIG_ORIGIN,
    CONFIG_SIZE,
    Color,
    CompassPosition,
    Config,
    ConfigKind,
    WidgetConfig,
)


class Widget:
    """Base class of everything that has a presence on the screen.

    A widget owns its configuration, a dictionary of system properties and a
    registry of user callbacks.  Event methods (``mouse_entered``, ``tick`` and
    so on) may be overridden; the default implementations forward to the
    matching callback in the registry, if one is set.
    """

    def __init__(self, x: int, y: int, w: int, h: int) -> None:
        self.config = WidgetConfig(x, y, w, h)
        self.system_properties: dict[int, str] = {}
        self.callbacks = CallbackRegistry()

    def draw(self, canvas: pygame.Surface) -> None:
        """Draw the widget onto `canvas`.  The base widget draws nothing."""

    # Events

    def mouse_entered(self, widgets: Sequence[Any]) -> None:
        """Called when the mouse enters the bounds of the widget."""
        self.mouse_entered_callback(widgets)

    def mouse_exited(self, widgets: Sequence[Any]) -> None:
        """Called when the mouse leaves the bounds of the widget."""
        self.mouse_exited_callback(widgets)

    def mouse_moved(self, widgets: Sequence[Any], points: Sequence[int]) -> None:
        """Called when the mouse moves within the bounds of the widget."""
        self.mouse_moved_callback(widgets, points)

    def mouse_scrolled(self, widgets: Sequence[Any], points: Sequence[int]) -> None:
        """Called when the mouse wheel scrolls within the bounds of the widget."""
        self.mouse_scrolled_callback(widgets, points)

    def button_clicked(
        self, widgets: Sequence[Any], button: int, clicks: int, state: bool
    ) -> None:
        """Called when a mouse button is pressed (`state` True) or released."""
        self.button_clicked_callback(widgets, button, clicks, state)

    def tick(self, widgets: Sequence[Any]) -> None:
        """Called once per frame, before drawing."""
        self.tick_callback(widgets)

    # Callback dispatch

    def tick_callback(self, widgets: Sequence[Any]) -> None:
        handler = self.callbacks.tick_handler
        if handler is not None:
            handler(self, widgets)

    def mouse_entered_callback(self, widgets: Sequence[Any]) -> None:
        handler = self.callbacks.mouse_entered_handler
        if handler is not None:
            handler(self, widgets)

    def mouse_exited_callback(self, widgets: Sequence[Any]) -> None:
        handler = self.callbacks.mouse_exited_handler
        if handler is not None:
            handler(self, widgets)

    def mouse_moved_callback(self, widgets: Sequence[Any], points: Sequence[int]) -> None:
        handler = self.callbacks.mouse_moved_handler
        if handler is not None:
            handler(self, widgets, points)

    def mouse_scrolled_callback(
        self, widgets: Sequence[Any], points: Sequence[int]
    ) -> None:
        handler = self.callbacks.mouse_scrolled_handler
        if handler is not None:
            handler(self, widgets, points)

    def button_clicked_callback(
        self, widgets: Sequence[Any], button: int, clicks: int, state: bool
    ) -> None:
        handler = self.callbacks.mouse_clicked_handler
        if handler is not None:
            handler(self, widgets, button, clicks, state)

    # Configuration

    def on_config_changed(self, key: int, value: Config) -> None:
        """Called after one of the widget-level setters changes a value."""

    def set_point(self, key: int, x: int, y: int) -> None:
        self.config.set_point(key, x, y)
        self.on_config_changed(key, Config(ConfigKind.POINTS, (x, y)))

    def set_color(self, key: int, color: Color) -> None:
        self.config.set_color(key, color)
        self.on_config_changed(key, Config(ConfigKind.COLOR, color))

    def set_numeric(self, key: int, value: int) -> None:
        self.config.set_numeric(key, value)
        self.on_config_changed(key, Config(ConfigKind.NUMERIC, int(value)))

    def set_text(self, key: int, text: str) -> None:
        self.config.set_text(key, text)
        self.on_config_changed(key, Config(ConfigKind.TEXT, str(text)))

    def set_toggle(self, key: int, flag: bool) -> None:
        self.config.set_toggle(key, flag)
        self.on_config_changed(key, Config(ConfigKind.TOGGLE, bool(flag)))

    def set_compass(self, key: int, value: CompassPosition) -> None:
        self.config.set_compass(key, value)
        self.on_config_changed(key, Config(ConfigKind.COMPASS_POSITION, value))

    def get_point(self, key: int) -> tuple[int, ...]:
        return self.config.get_point(key)

    def get_size(self, key: int) -> tuple[int, ...]:
        return self.config.get_size(key)

    def get_color(self, key: int) -> Color:
        return self.config.get_color(key)

    def get_numeric(self, key: int) -> int:
        return self.config.get_numeric(key)

    def get_text(self, key: int) -> str:
        return self.config.get_text(key)

    def get_toggle(self, key: int) -> bool:
        return self.config.get_toggle(key)

    def get_compass(self, key: int) -> CompassPosition:
        return self.config.get_compass(key)

    def set_origin(self, origin: Sequence[int]) -> None:
        """Move the widget, invalidating it only if the origin actually changes."""
        x, y = origin[0], origin[1]
        if tuple(self.config.get_point(CONFIG_ORIGIN)) != (x, y):
            self.config.set_point(CONFIG_ORIGIN, x, y)
            self.config.invalidated = True

    def set_size(self, size: Sequence[int]) -> None:
        """Resize the widget, invalidating it only if the size actually changes."""
        w, h = size[0], size[1]
        if tuple(self.config.get_size(CONFIG_SIZE)) != (w, h):
            self.config.set_size(CONFIG_SIZE, w, h)
            self.config.invalidated = True

    def drawing_area(self) -> pygame.Rect:
        """Return the bounds of the widget on the canvas."""
        w, h = self.config.get_size(CONFIG_SIZE)
        return pygame.Rect(self.config.to_x(0), self.config.to_y(0), w, h)


class BaseWidget(Widget):
    """A widget that fills its bounds with the base colour and draws a border.

    The border is drawn in the border colour, `CONFIG_BORDER_WIDTH` pixels wide,
    and only when that colour differs from the base colour.
    """

    def draw(self, canvas: pygame.Surface) -> None:
        base_color = self.config.get_color(CONFIG_COLOR_BASE)
        border_color = self.config.get_color(CONFIG_COLOR_BORDER)

        canvas.fill(tuple(base_color), self.drawing_area())

        border_width = self.config.get_numeric(CONFIG_BORDER_WIDTH)
        if border_width <= 0 or base_color == border_color:
            return

        w, h = self.config.get_size(CONFIG_SIZE)
        for border in range(border_width):
            inner_w = w - border * 2
            inner_h = h - border * 2
            if inner_w <= 0 or inner_h <= 0:
                break
            rect = pygame.Rect(
                self.config.to_x(border), self.config.to_y(border), inner_w, inner_h
            )
            pygame.draw.rect(canvas, tuple(border_color), rect, 1)