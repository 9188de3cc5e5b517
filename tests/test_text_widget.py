import pygame
import pytest

from pushrod.render.widget_config import (
    CONFIG_COLOR_BASE,
    CONFIG_COLOR_TEXT,
    CONFIG_FONT_SIZE,
    CONFIG_PROGRESS,
    CONFIG_TEXT,
    Color,
)
from pushrod.widgets.text_widget import (
    FontStyle,
    TextJustify,
    TextWidget,
    text_x_offset,
)


def make_widget(justification=TextJustify.LEFT, msg="Hello", w=200, h=40):
    widget = TextWidget(None, FontStyle.NORMAL, 20, justification, msg, 0, 0, w, h)
    widget.set_color(CONFIG_COLOR_TEXT, Color(0, 0, 0))
    return widget


def test_left_offset_is_zero():
    assert text_x_offset(TextJustify.LEFT, 100, 30) == 0


def test_right_offset_puts_text_at_edge():
    offset = text_x_offset(TextJustify.RIGHT, 100, 30)
    assert offset + 30 == 100


def test_center_offset_is_symmetric():
    offset = text_x_offset(TextJustify.CENTER, 100, 30)
    assert offset * 2 + 30 == 100


def test_center_offset_truncates_toward_zero():
    assert text_x_offset(TextJustify.CENTER, 10, 15) == -2


def test_set_text_updates_message_and_invalidates():
    widget = make_widget()
    widget.config.invalidated = False
    widget.set_text(CONFIG_TEXT, "World")
    assert widget.msg == "World"
    assert widget.config.invalidated is True


def test_set_font_size_updates_font():
    widget = make_widget()
    widget.config.invalidated = False
    widget.set_numeric(CONFIG_FONT_SIZE, 30)
    assert widget.font_size == 30
    assert widget.config.invalidated is True


@pytest.mark.parametrize("key", [CONFIG_COLOR_TEXT, CONFIG_COLOR_BASE])
def test_color_changes_invalidate(key):
    widget = make_widget()
    widget.config.invalidated = False
    widget.set_color(key, Color(10, 20, 30))
    assert widget.config.invalidated is True


def test_unrelated_key_does_not_invalidate():
    widget = make_widget()
    widget.config.invalidated = False
    widget.set_numeric(CONFIG_PROGRESS, 5)
    assert widget.config.invalidated is False
    assert widget.font_size == 20


def test_font_style_flags_combine():
    style = FontStyle(FontStyle.BOLD.value | FontStyle.ITALIC.value)
    assert FontStyle.BOLD in style
    assert FontStyle.ITALIC in style
    assert FontStyle.UNDERLINE not in style


def test_draw_fills_background_and_renders_text():
    canvas = pygame.Surface((200, 40))
    canvas.fill((0, 0, 255))
    widget = make_widget()
    widget.draw(canvas)
    assert canvas.get_at((199, 39))[:3] == (255, 255, 255)
    assert any(
        canvas.get_at((x, y))[0] < 128 for x in range(80) for y in range(40)
    )


def test_draw_right_justified_leaves_left_side_blank():
    canvas = pygame.Surface((200, 40))
    widget = make_widget(TextJustify.RIGHT, msg="Hi")
    widget.draw(canvas)
    assert all(
        canvas.get_at((x, y))[:3] == (255, 255, 255) for x in range(100) for y in range(40)
    )
    assert any(
        canvas.get_at((x, y))[0] < 128 for x in range(100, 200) for y in range(40)
    )