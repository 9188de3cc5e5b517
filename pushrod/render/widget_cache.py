"""The list of widgets managed by the engine, with event dispatch and redraw."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pygame

from pushrod.render.widget import Widget
from pushrod.render.widget_config import CONFIG_ORIGIN, CONFIG_SIZE

_log = logging.getLogger(__name__)

_DISABLED_OVERLAY = (0, 0, 0, 128)


@dataclass
class WidgetContainer:
    """A widget together with its name, origin in the window, ID and parent ID.

    A parent ID of 0 means the widget hangs off the top-level widget.
    """

    widget: Widget
    widget_name: str
    origin: tuple[int, ...] = field(default=())
    widget_id: int = 0
    parent_id: int = 0


class WidgetCache:
    """Ordered list of widgets.  IDs are assigned on insertion, starting at 0.

    The widget with ID 0 is the top-level widget: lookups that find nothing
    fall back to it.
    """

    def __init__(self) -> None:
        self._cache: list[WidgetContainer] = []

    def __len__(self) -> int:
        return len(self._cache)

    def add_widget(self, widget: Widget, widget_name: str) -> int:
        """Add `widget` to the render list and return its ID."""
        origin = tuple(widget.config.get_point(CONFIG_ORIGIN))
        widget_id = len(self._cache)
        self._cache.append(
            WidgetContainer(
                widget=widget,
                widget_name=widget_name,
                origin=origin,
                widget_id=widget_id,
                parent_id=0,
            )
        )
        return widget_id

    def find_widget(self, x: int, y: int) -> int:
        """Return the ID of the top-most visible widget at (`x`, `y`), or 0."""
        found = 0
        for container in self._cache:
            config = container.widget.config
            if config.hidden:
                continue
            start_x, start_y = config.get_point(CONFIG_ORIGIN)
            width, height = config.get_size(CONFIG_SIZE)
            if start_x <= x <= start_x + width and start_y <= y <= start_y + height:
                found = container.widget_id
        return found

    def container_by_id(self, widget_id: int) -> WidgetContainer:
        """Return the container for `widget_id`; raise IndexError if there is none."""
        if widget_id < 0 or widget_id >= len(self._cache):
            raise IndexError(f"no widget with id {widget_id}")
        return self._cache[widget_id]

    def container_by_name(self, name: str) -> WidgetContainer:
        """Return the first container named `name`, or the top-level container."""
        for container in self._cache:
            if container.widget_name == name:
                return container
        return self.container_by_id(0)

    # Event dispatch

    def _accepts_events(self, widget_id: int) -> bool:
        config = self.container_by_id(widget_id).widget.config
        return not config.hidden and config.enabled

    def button_clicked(self, widget_id: int, button: int, clicks: int, state: bool) -> None:
        """Send a button press or release to `widget_id`, or to every widget if it is -1."""
        if widget_id == -1:
            for container in self._cache:
                if self._accepts_events(container.widget_id):
                    container.widget.button_clicked(self._cache, button, clicks, state)
        elif self._accepts_events(widget_id):
            self._cache[widget_id].widget.button_clicked(self._cache, button, clicks, state)

    def mouse_moved(self, widget_id: int, points: list[int]) -> None:
        if self._accepts_events(widget_id):
            self._cache[widget_id].widget.mouse_moved(self._cache, points)

    def mouse_scrolled(self, widget_id: int, points: list[int]) -> None:
        if self._accepts_events(widget_id):
            self._cache[widget_id].widget.mouse_scrolled(self._cache, points)

    def mouse_exited(self, widget_id: int) -> None:
        if self._accepts_events(widget_id):
            self._cache[widget_id].widget.mouse_exited(self._cache)

    def mouse_entered(self, widget_id: int) -> None:
        if self._accepts_events(widget_id):
            self._cache[widget_id].widget.mouse_entered(self._cache)

    def tick(self) -> None:
        """Tell every visible widget that a frame is about to be drawn."""
        for container in self._cache:
            if not container.widget.config.hidden:
                container.widget.tick(self._cache)

    # Drawing

    def draw_loop(self, canvas: pygame.Surface) -> bool:
        """Redraw the widgets if any is invalidated.

        Each widget is clipped to its own bounds while it draws.  Returns True
        when something was painted and the canvas should be presented.
        """
        if any(container.widget.config.invalidated for container in self._cache):
            needs_present = self._draw(0, canvas)
            if needs_present:
                _log.debug("Presenting canvas.")
            return needs_present
        return False

    def _children_of(self, widget_id: int) -> list[int]:
        return [c.widget_id for c in self._cache if c.parent_id == widget_id]

    def _draw(self, widget_id: int, canvas: pygame.Surface) -> bool:
        children = self._children_of(widget_id)
        if not children:
            return False

        top_level_rect = self._cache[0].widget.drawing_area()
        needs_present = False

        for paint_id in children:
            widget = self._cache[paint_id].widget
            config = widget.config
            hidden = config.hidden
            enabled = config.enabled
            invalidated = config.invalidated
            area = widget.drawing_area()

            _log.debug(
                "Widget redraw: id=%d hidden=%s invalidated=%s", paint_id, hidden, invalidated
            )

            if not hidden and invalidated:
                canvas.set_clip(area)
                widget.draw(canvas)
                config.invalidated = False
                canvas.set_clip(top_level_rect)
                needs_present = True

            if paint_id != widget_id and self._draw(paint_id, canvas):
                needs_present = True

            if not enabled:
                pygame.draw.rect(canvas, _DISABLED_OVERLAY, area, 1)

        return needs_present