import pygame
import pytest

from pushrod.render.widget import BaseWidget, Widget
from pushrod.render.widget_config import (
    CONFIG_BORDER_WIDTH,
    CONFIG_COLOR_BASE,
    CONFIG_COLOR_BORDER,
    CONFIG_COLOR_TEXT,
    CONFIG_FONT_SIZE,
    CONFIG_IMAGE_POSITION,
    CONFIG_ORIGIN,
    CONFIG_SELECTED_STATE,
    CONFIG_SIZE,
    CONFIG_TEXT,
    WHITE,
    Color,
    CompassPosition,
    Config,
    ConfigKind,
)

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


class RecordingWidget(Widget):
    def __init__(self, *args):
        super().__init__(*args)
        self.changes = []

    def on_config_changed(self, key, value):
        self.changes.append((key, value))


def test_new_widget_stores_origin_and_size():
    widget = Widget(3, 4, 50, 60)
    assert widget.get_point(CONFIG_ORIGIN) == (3, 4)
    assert widget.get_size(CONFIG_SIZE) == (50, 60)
    assert widget.config.invalidated is True


def test_getter_defaults():
    widget = Widget(0, 0, 10, 10)
    assert widget.get_color(CONFIG_COLOR_TEXT) == WHITE
    assert widget.get_numeric(CONFIG_FONT_SIZE) == 0
    assert widget.get_text(CONFIG_TEXT) == ""
    assert widget.get_toggle(CONFIG_SELECTED_STATE) is False
    assert widget.get_compass(CONFIG_IMAGE_POSITION) is CompassPosition.W


def test_setters_round_trip_and_notify():
    widget = RecordingWidget(0, 0, 10, 10)
    widget.set_point(CONFIG_ORIGIN, 5, 6)
    widget.set_color(CONFIG_COLOR_TEXT, RED)
    widget.set_numeric(CONFIG_FONT_SIZE, 14)
    widget.set_text(CONFIG_TEXT, "hello")
    widget.set_toggle(CONFIG_SELECTED_STATE, True)
    widget.set_compass(CONFIG_IMAGE_POSITION, CompassPosition.SE)

    assert widget.get_point(CONFIG_ORIGIN) == (5, 6)
    assert widget.get_color(CONFIG_COLOR_TEXT) == RED
    assert widget.get_numeric(CONFIG_FONT_SIZE) == 14
    assert widget.get_text(CONFIG_TEXT) == "hello"
    assert widget.get_toggle(CONFIG_SELECTED_STATE) is True
    assert widget.get_compass(CONFIG_IMAGE_POSITION) is CompassPosition.SE

    assert widget.changes == [
        (CONFIG_ORIGIN, Config(ConfigKind.POINTS, (5, 6))),
        (CONFIG_COLOR_TEXT, Config(ConfigKind.COLOR, RED)),
        (CONFIG_FONT_SIZE, Config(ConfigKind.NUMERIC, 14)),
        (CONFIG_TEXT, Config(ConfigKind.TEXT, "hello")),
        (CONFIG_SELECTED_STATE, Config(ConfigKind.TOGGLE, True)),
        (CONFIG_IMAGE_POSITION, Config(ConfigKind.COMPASS_POSITION, CompassPosition.SE)),
    ]


def test_set_origin_invalidates_only_on_change():
    widget = Widget(1, 2, 10, 10)
    widget.config.invalidated = False
    widget.set_origin((1, 2))
    assert widget.config.invalidated is False
    assert widget.get_point(CONFIG_ORIGIN) == (1, 2)

    widget.set_origin((7, 8))
    assert widget.config.invalidated is True
    assert widget.get_point(CONFIG_ORIGIN) == (7, 8)


def test_set_size_invalidates_only_on_change():
    widget = Widget(0, 0, 10, 20)
    widget.config.invalidated = False
    widget.set_size((10, 20))
    assert widget.config.invalidated is False

    widget.set_size((30, 40))
    assert widget.config.invalidated is True
    assert widget.get_size(CONFIG_SIZE) == (30, 40)


def test_set_size_rejects_negative():
    widget = Widget(0, 0, 10, 20)
    with pytest.raises(ValueError):
        widget.set_size((-1, 5))


def test_drawing_area_matches_bounds():
    widget = Widget(3, 4, 50, 60)
    assert widget.drawing_area() == pygame.Rect(3, 4, 50, 60)
    widget.set_origin((10, 11))
    assert widget.drawing_area() == pygame.Rect(10, 11, 50, 60)


def test_tick_and_enter_exit_callbacks():
    widget = Widget(0, 0, 10, 10)
    calls = []
    widgets = ["a", "b"]
    widget.callbacks.on_tick(lambda w, ws: calls.append(("tick", w, ws)))
    widget.callbacks.on_mouse_entered(lambda w, ws: calls.append(("enter", w, ws)))
    widget.callbacks.on_mouse_exited(lambda w, ws: calls.append(("exit", w, ws)))

    widget.tick(widgets)
    widget.mouse_entered(widgets)
    widget.mouse_exited(widgets)

    assert calls == [
        ("tick", widget, widgets),
        ("enter", widget, widgets),
        ("exit", widget, widgets),
    ]


def test_points_and_click_callbacks_receive_arguments():
    widget = Widget(0, 0, 10, 10)
    calls = []
    widget.callbacks.on_mouse_moved(lambda w, ws, p: calls.append(("move", p)))
    widget.callbacks.on_mouse_scrolled(lambda w, ws, p: calls.append(("scroll", p)))
    widget.callbacks.on_mouse_clicked(
        lambda w, ws, b, c, s: calls.append(("click", b, c, s))
    )

    widget.mouse_moved([], [4, 5])
    widget.mouse_scrolled([], [0, -1])
    widget.button_clicked([], 1, 2, True)

    assert calls == [("move", [4, 5]), ("scroll", [0, -1]), ("click", 1, 2, True)]


def test_callback_can_modify_widget():
    widget = Widget(0, 0, 10, 10)
    widget.callbacks.on_tick(lambda w, ws: w.set_text(CONFIG_TEXT, "ticked"))
    widget.tick([])
    assert widget.get_text(CONFIG_TEXT) == "ticked"


def _canvas():
    surface = pygame.Surface((20, 20))
    surface.fill((0, 0, 0))
    return surface


def test_base_widget_draws_fill_and_border():
    widget = BaseWidget(2, 2, 10, 10)
    widget.set_color(CONFIG_COLOR_BASE, RED)
    widget.set_color(CONFIG_COLOR_BORDER, BLUE)
    widget.set_numeric(CONFIG_BORDER_WIDTH, 1)
    canvas = _canvas()

    widget.draw(canvas)

    assert canvas.get_at((2, 2)) == tuple(BLUE)
    assert canvas.get_at((11, 11)) == tuple(BLUE)
    assert canvas.get_at((5, 5)) == tuple(RED)
    assert canvas.get_at((0, 0)) == (0, 0, 0, 255)
    assert canvas.get_at((12, 12)) == (0, 0, 0, 255)


def test_base_widget_thicker_border():
    widget = BaseWidget(2, 2, 10, 10)
    widget.set_color(CONFIG_COLOR_BASE, RED)
    widget.set_color(CONFIG_COLOR_BORDER, BLUE)
    widget.set_numeric(CONFIG_BORDER_WIDTH, 2)
    canvas = _canvas()

    widget.draw(canvas)

    assert canvas.get_at((3, 3)) == tuple(BLUE)
    assert canvas.get_at((4, 4)) == tuple(RED)


def test_base_widget_skips_border_matching_base():
    widget = BaseWidget(2, 2, 10, 10)
    widget.set_color(CONFIG_COLOR_BASE, RED)
    widget.set_color(CONFIG_COLOR_BORDER, RED)
    widget.set_numeric(CONFIG_BORDER_WIDTH, 1)
    canvas = _canvas()

    widget.draw(canvas)

    assert canvas.get_at((2, 2)) == tuple(RED)


def test_base_widget_without_border_fills_whole_area():
    widget = BaseWidget(0, 0, 5, 5)
    widget.set_color(CONFIG_COLOR_BASE, BLUE)
    widget.set_color(CONFIG_COLOR_BORDER, RED)
    canvas = _canvas()

    widget.draw(canvas)

    assert canvas.get_at((0, 0)) == tuple(BLUE)
    assert canvas.get_at((4, 4)) == tuple(BLUE)
    assert canvas.get_at((5, 5)) == (0, 0, 0, 255)