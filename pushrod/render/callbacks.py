"""Registry of user callbacks that a widget invokes on events."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

NoParamsCallback = Callable[[Any, Any], None]
PointsCallback = Callable[[Any, Any, Any], None]
ClickCallback = Callable[[Any, Any, int, int, bool], None]


class CallbackRegistry:
    """Holds the callbacks for tick, mouse enter, exit, move, scroll and click events.

    Each callback receives the widget it belongs to and the list of widget
    containers, followed by any event-specific arguments.
    """

    def __init__(self) -> None:
        self.tick_handler: Optional[NoParamsCallback] = None
        self.mouse_entered_handler: Optional[NoParamsCallback] = None
        self.mouse_exited_handler: Optional[NoParamsCallback] = None
        self.mouse_moved_handler: Optional[PointsCallback] = None
        self.mouse_scrolled_handler: Optional[PointsCallback] = None
        self.mouse_clicked_handler: Optional[ClickCallback] = None

    def on_tick(self, callback: NoParamsCallback) -> None:
        """Set the callback run on every screen refresh."""
        self.tick_handler = callback

    def on_mouse_entered(self, callback: NoParamsCallback) -> None:
        """Set the callback run when the mouse enters the widget."""
        self.mouse_entered_handler = callback

    def on_mouse_exited(self, callback: NoParamsCallback) -> None:
        """Set the callback run when the mouse leaves the widget."""
        self.mouse_exited_handler = callback

    def on_mouse_moved(self, callback: PointsCallback) -> None:
        """Set the callback run when the mouse moves inside the widget."""
        self.mouse_moved_handler = callback

    def on_mouse_scrolled(self, callback: PointsCallback) -> None:
        """Set the callback run when the mouse wheel scrolls inside the widget."""
        self.mouse_scrolled_handler = callback

    def on_mouse_clicked(self, callback: ClickCallback) -> None:
        """Set the callback run when a mouse button is pressed or released."""
        self.mouse_clicked_handler = callback

    def has_on_tick(self) -> bool:
        return self.tick_handler is not None

    def has_on_mouse_entered(self) -> bool:
        return self.mouse_entered_handler is not None

    def has_on_mouse_exited(self) -> bool:
        return self.mouse_exited_handler is not None

    def has_on_mouse_moved(self) -> bool:
        return self.mouse_moved_handler is not None

    def has_on_mouse_scrolled(self) -> bool:
        return self.mouse_scrolled_handler is not None

    def has_on_mouse_clicked(self) -> bool:
        return self.mouse_clicked_handler is not None


def widget_id_for_name(widgets: Iterable[Any], name: str) -> int:
    """Return the ID of the first container whose widget is called `name`, or 0."""
    return next(
        (container.widget_id for container in widgets if container.widget_name == name),
        0,
    )