# pushrod

`pushrod` is a small widget toolkit for building graphical interfaces on top
of pygame. Each widget has a position, a size and a set of typed
configuration values. An event engine sends mouse events to the widget under
the pointer and sends a tick to every visible widget on each frame. Only
widgets that have been marked as invalidated are painted again.

## Concepts

- **Engine** (`pushrod.render.engine.Engine`) owns a `WidgetCache` and runs
  the main loop. Call `setup(width, height)` first. It adds a full-window
  `BaseWidget` named `"base"`, which gets ID 0. Other widgets are added with
  `add_widget(widget, name)`, which returns the new widget's ID. `run(surface)`
  runs the loop at about 60 frames per second and returns when a quit event
  arrives. `handle_event(event)` dispatches a single pygame event and returns
  `False` for a quit event, so you can drive your own loop instead.
- **Widgets** derive from `pushrod.render.widget.Widget`. Every widget holds a
  `WidgetConfig` (`pushrod.render.widget_config`), which stores values under
  the integer keys `CONFIG_ORIGIN`, `CONFIG_SIZE`, `CONFIG_COLOR_BASE`,
  `CONFIG_COLOR_BORDER`, `CONFIG_COLOR_TEXT`, `CONFIG_COLOR_SECONDARY`,
  `CONFIG_BORDER_WIDTH`, `CONFIG_TEXT`, `CONFIG_PROGRESS`,
  `CONFIG_IMAGE_POSITION`, `CONFIG_FONT_SIZE`, `CONFIG_SELECTED_STATE` and
  others. Getters return a default when a key is unset or holds another kind
  of value: white, 0, `""`, `False`, `CompassPosition.W` or an empty tuple.
  The widget-level setters (`set_color`, `set_numeric`, `set_text`,
  `set_toggle`, `set_compass`, `set_point`) store the value and then call
  `on_config_changed`, where a widget decides whether it must be redrawn.
  `set_origin` and `set_size` invalidate the widget only when the value
  actually changes.
- **Colours** are `Color(r, g, b, a=255)` values with channels from 0 to 255.
  The module also provides `WHITE` and `BLACK`.
- **Callbacks**: each widget has a `CallbackRegistry` in `widget.callbacks`.
  Register functions with `on_tick`, `on_mouse_entered`, `on_mouse_exited`,
  `on_mouse_moved`, `on_mouse_scrolled` and `on_mouse_clicked`. Every callback
  receives the widget and the list of `WidgetContainer`s, followed by any
  event arguments: the points for move and scroll, and
  `(button, clicks, state)` for clicks. This lets one widget update another.
  `pushrod.render.callbacks.widget_id_for_name(widgets, name)` returns the ID
  of the widget with that name, or 0 if there is none.

## Bundled widgets

| Widget | Module | Purpose |
| --- | --- | --- |
| `BaseWidget` | `pushrod.render.widget` | Fills its bounds with the base colour and draws a border `CONFIG_BORDER_WIDTH` pixels wide |
| `TextWidget` | `pushrod.widgets.text_widget` | Text wrapped at spaces to the widget width, justified `LEFT`, `CENTER` or `RIGHT`, with `FontStyle` flags |
| `ImageWidget` | `pushrod.widgets.image_widget` | An image file placed by compass position, or scaled to fill the widget |
| `ProgressWidget` | `pushrod.widgets.progress_widget` | A bordered bar filled in proportion to `CONFIG_PROGRESS` (0 to 100) |
| `TimerWidget` | `pushrod.widgets.timer_widget` | Calls its `on_timeout` function every *n* milliseconds while enabled |
| `PushButtonWidget` | `pushrod.widgets.push_button_widget` | A button that calls its `on_click` function when clicked |
| `ToggleButtonWidget` | `pushrod.widgets.toggle_button_widget` | A button that flips its `selected` state and calls its `on_toggle` function |

`TextWidget` takes a font file path, or `None` for pygame's default font. The
two button widgets use the default font.

## Example

```python
import pygame

from pushrod.render.engine import Engine
from pushrod.widgets.push_button_widget import PushButtonWidget
from pushrod.widgets.toggle_button_widget import ToggleButtonWidget
from pushrod.widgets.timer_widget import TimerWidget

pygame.init()
surface = pygame.display.set_mode((400, 300))

engine = Engine()
engine.setup(400, 300)

button = PushButtonWidget(20, 20, 160, 40, "Press me", 14)
button.on_click(lambda widget, widgets: print("clicked"))
engine.add_widget(button, "button")

toggle = ToggleButtonWidget(20, 80, 160, 40, "Toggle", 14, False)
toggle.on_toggle(lambda widget, widgets, selected: print("selected:", selected))
engine.add_widget(toggle, "toggle")

timer = TimerWidget(1000, True)
timer.on_timeout(lambda widget, widgets: print("one second passed"))
engine.add_widget(timer, "timer")

engine.run(surface)
```

Initialise pygame and create the display surface yourself before calling
`run`.

## Event handling

- A mouse press goes to the widget under the pointer.
- A mouse release goes to every visible, enabled widget. This way a button
  that was pressed and then left by the pointer can still reset its state.
- Mouse movement finds the top-most visible widget under the pointer, which
  is the last one added that contains the point. When that widget changes,
  the old one gets `mouse_exited` and the new one gets `mouse_entered`. The
  widget under the pointer then gets `mouse_moved`.
- Wheel events go to the widget under the pointer as `mouse_scrolled`.
- Hidden widgets get no events. Disabled widgets still get ticks and are
  still drawn, with a dark outline, but they get no mouse events.
- On every frame, each visible widget gets a `tick`. If any widget is
  invalidated, the widgets are walked in the order they were added. Each
  visible, invalidated widget is drawn clipped to its own bounds and then
  marked valid, and the display is flipped.

## Limitations

- Only mouse, wheel and quit events are handled. Keyboard and other events
  are logged at debug level and otherwise ignored.
- All widgets are children of the top-level widget. There is no API to nest
  widgets under another parent.
- `ImageWidget` loads its image file from disk each time it draws.