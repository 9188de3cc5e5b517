"""The event engine: routes window events to widgets and drives the draw loop."""

from __future__ import annotations

import logging

import pygame

from pushrod.render.widget import BaseWidget, Widget
from pushrod.render.widget_cache import WidgetCache

_log = logging.getLogger(__name__)

_FRAMES_PER_SECOND = 60


class Engine:
    """Owns the widget cache and tracks the widget under the mouse.

    Call `setup` with the window size to add the top-level widget, add the
    application's widgets with `add_widget`, then call `run`.
    """

    def __init__(self) -> None:
        self.cache = WidgetCache()
        self.current_widget_id = 0

    def setup(self, window_width: int, window_height: int) -> None:
        """Add the top-level widget covering the whole window."""
        self.cache.add_widget(BaseWidget(0, 0, window_width, window_height), "base")

    def add_widget(self, widget: Widget, widget_name: str) -> int:
        """Add a widget to the display list and return its ID."""
        return self.cache.add_widget(widget, widget_name)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one event.  Returns False when the event asks to quit."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            clicks = getattr(event, "clicks", 1)
            self.cache.button_clicked(self.current_widget_id, event.button, clicks, True)
        elif event.type == pygame.MOUSEBUTTONUP:
            clicks = getattr(event, "clicks", 1)
            self.cache.button_clicked(-1, event.button, clicks, False)
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            previous = self.current_widget_id
            self.current_widget_id = self.cache.find_widget(x, y)
            if previous != self.current_widget_id:
                self.cache.mouse_exited(previous)
                self.cache.mouse_entered(self.current_widget_id)
            self.cache.mouse_moved(self.current_widget_id, [x, y])
        elif event.type == pygame.MOUSEWHEEL:
            self.cache.mouse_scrolled(self.current_widget_id, [event.x, event.y])
        elif event.type == pygame.QUIT:
            return False
        else:
            _log.debug("Event: %s", event)
        return True

    def run(self, surface: pygame.Surface) -> None:
        """Run the main loop on the display `surface` until a quit event arrives."""
        clock = pygame.time.Clock()
        surface.fill((0, 0, 0))
        pygame.display.flip()

        while True:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    return

            self.cache.tick()
            if self.cache.draw_loop(surface):
                pygame.display.flip()

            clock.tick(_FRAMES_PER_SECOND)