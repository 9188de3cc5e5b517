"""A push button that calls a function when it is clicked."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

import pygame

from pushrod.render.widget import BaseWidget, Widget
from pushrod.render.widget_config import (
    BLACK,
    CONFIG_BORDER_WIDTH,
    CONFIG_COLOR_BASE,
    CONFIG_COLOR_BORDER,
    CONFIG_COLOR_TEXT,
    WHITE,
)
from pushrod.widgets.text_widget import FontStyle, TextJustify, TextWidget

_log = logging.getLogger(__name__)

ClickCallback = Callable[["PushButtonWidget", Sequence[Any]], None]

_BUTTON_PRIMARY = 1


class PushButtonWidget(Widget):
    """A bordered button showing centred text.

    Pressing the primary mouse button inverts the colours.  Releasing it while
    the mouse is still over the button calls the `on_click` callback.
    """

    def __init__(self, x: int, y: int, w: int, h: int, text: str, font_size: int) -> None:
        super().__init__(x, y, w, h)
        self.base_widget = BaseWidget(x, y, w, h)
        self.text_widget = TextWidget(
            None,
            FontStyle.NORMAL,
            font_size,
            TextJustify.CENTER,
            text,
            x + 2,
            y + 2,
            w - 4,
            h - 4,
        )

        self.base_widget.set_color(CONFIG_COLOR_BASE, WHITE)
        self.base_widget.set_color(CONFIG_COLOR_BORDER, BLACK)
        self.base_widget.set_numeric(CONFIG_BORDER_WIDTH, 2)
        self.text_widget.set_color(CONFIG_COLOR_TEXT, BLACK)

        self.active = False
        self.in_bounds = False
        self._on_click: Optional[ClickCallback] = None

    def _draw_hovered(self) -> None:
        self.base_widget.set_color(CONFIG_COLOR_BASE, BLACK)
        self.text_widget.set_color(CONFIG_COLOR_TEXT, WHITE)
        self.text_widget.set_color(CONFIG_COLOR_BASE, BLACK)
        self.config.invalidated = True

    def _draw_unhovered(self) -> None:
        self.base_widget.set_color(CONFIG_COLOR_BASE, WHITE)
        self.text_widget.set_color(CONFIG_COLOR_TEXT, BLACK)
        self.text_widget.set_color(CONFIG_COLOR_BASE, WHITE)
        self.config.invalidated = True

    def on_click(self, callback: ClickCallback) -> None:
        """Set the function called with the widget and widget list on a click."""
        self._on_click = callback

    def draw(self, canvas: pygame.Surface) -> None:
        self.base_widget.draw(canvas)
        self.text_widget.draw(canvas)

    def mouse_entered(self, widgets: Sequence[Any]) -> None:
        if self.active:
            self._draw_hovered()
        self.in_bounds = True
        self.mouse_entered_callback(widgets)

    def mouse_exited(self, widgets: Sequence[Any]) -> None:
        if self.active:
            self._draw_unhovered()
        self.in_bounds = False
        self.mouse_exited_callback(widgets)

    def button_clicked(
        self, widgets: Sequence[Any], button: int, clicks: int, state: bool
    ) -> None:
        if button == _BUTTON_PRIMARY:
            if state:
                self._draw_hovered()
                self.active = True
            else:
                was_active = self.active
                self._draw_unhovered()
                self.active = False
                if self.in_bounds and was_active:
                    _log.debug("Button clicked: clicks=%d", clicks)
                    if self._on_click is not None:
                        self._on_click(self, widgets)

        self.button_clicked_callback(widgets, button, clicks, state)