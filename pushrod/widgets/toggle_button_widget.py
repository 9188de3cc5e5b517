"""A button that switches between selected and unselected when clicked."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import pygame

from pushrod.render.widget import BaseWidget, Widget
from pushrod.render.widget_config import (
    BLACK,
    CONFIG_BORDER_WIDTH,
    CONFIG_COLOR_BASE,
    CONFIG_COLOR_BORDER,
    CONFIG_COLOR_TEXT,
    CONFIG_SELECTED_STATE,
    WHITE,
    Color,
)
from pushrod.widgets.text_widget import FontStyle, TextJustify, TextWidget

ToggleCallback = Callable[["ToggleButtonWidget", Sequence[Any], bool], None]

_BUTTON_PRIMARY = 1


def _colours(inverted: bool) -> tuple[Color, Color]:
    """Return (base, text) colours: black on white, or white on black if inverted."""
    return (BLACK, WHITE) if inverted else (WHITE, BLACK)


class ToggleButtonWidget(Widget):
    """A bordered button showing centred text that toggles its selected state.

    A selected button is drawn white on black.  Releasing the primary mouse
    button over the widget flips the state, stores it under
    `CONFIG_SELECTED_STATE` and calls the `on_toggle` callback with the new state.
    """

    def __init__(
        self, x: int, y: int, w: int, h: int, text: str, font_size: int, selected: bool
    ) -> None:
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

        base_color, text_color = _colours(selected)
        self.base_widget.set_color(CONFIG_COLOR_BASE, base_color)
        self.base_widget.set_color(CONFIG_COLOR_BORDER, BLACK)
        self.base_widget.set_numeric(CONFIG_BORDER_WIDTH, 2)
        self.text_widget.set_color(CONFIG_COLOR_BASE, base_color)
        self.text_widget.set_color(CONFIG_COLOR_TEXT, text_color)

        self.config.set_toggle(CONFIG_SELECTED_STATE, selected)

        self.active = False
        self.selected = selected
        self.in_bounds = False
        self._on_toggle: Optional[ToggleCallback] = None

    def _apply_colours(self, inverted: bool) -> None:
        base_color, text_color = _colours(inverted)
        self.base_widget.set_color(CONFIG_COLOR_BASE, base_color)
        self.text_widget.set_color(CONFIG_COLOR_TEXT, text_color)
        self.text_widget.set_color(CONFIG_COLOR_BASE, base_color)
        self.config.invalidated = True

    def _draw_hovered(self) -> None:
        self._apply_colours(not self.selected)

    def _draw_unhovered(self) -> None:
        self._apply_colours(self.selected)

    def on_toggle(self, callback: ToggleCallback) -> None:
        """Set the function called with the widget, widget list and new state on a toggle."""
        self._on_toggle = callback

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
                self.active = False
                if self.in_bounds:
                    self.selected = not self.selected
                    self.set_toggle(CONFIG_SELECTED_STATE, self.selected)
                    if self._on_toggle is not None:
                        self._on_toggle(self, widgets, self.selected)

        self.button_clicked_callback(widgets, button, clicks, state)