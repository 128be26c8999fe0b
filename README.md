# gridfront

`gridfront` holds the front-end state of a grid-based text editor UI: the
parts that decide where windows and the cursor are, how they animate, and
what keybindings to send back to the editor. It has no dependency on any
graphics or windowing toolkit and no third-party dependencies at all.

## What is inside

- `gridfront.geometry`: `Dimensions`, `Point` and `Rect` value types for
  grid and pixel arithmetic. `Dimensions` round-trips through JSON with
  `to_json` / `from_json`.
- `gridfront.animation`: easing functions (`ease_linear`, `ease_in_quad`,
  `ease_out_expo`, `ease_in_out_cubic`, ...) together with `lerp`, `ease`
  and `ease_point`.
- `gridfront.settings`: a `Settings` registry holding one value per setting
  type (`set` / `get`), plus per-name update and reader handlers that can be
  synchronised with editor variables prefixed `gridfront_` through an async
  client object offering `get_var`, `set_var` and `command`. A module-level
  `SETTINGS` instance is provided.
- `gridfront.values`: conversion of loosely typed incoming values into
  typed setting fields (`float_from_value`, `u64_from_value`,
  `u32_from_value`, `i32_from_value`, `str_from_value`, `bool_from_value`);
  an unsuitable value is logged and the current value kept.
- `gridfront.config`: the setting groups `WindowSettings`,
  `KeyboardSettings`, `RendererSettings` and `CursorSettings` with their
  defaults.
- `gridfront.window_geometry`: `parse_window_geometry` parses
  `<width>x<height>` strings (raising `GeometryError` when invalid), and
  `maybe_save_window_size` / `try_to_load_last_window_size` store the last
  window size as JSON under the home directory.
- `gridfront.font_options`: `FontOptions.parse` reads `guifont`-style
  strings such as `"Fira Code,Noto:h12:b"`; `FontKey` and `FontSelection`
  describe which font to load.
- `gridfront.keyboard`: `KeyboardManager` collects key events for a frame
  and turns them into editor keybinding strings such as `<C-Tab>`.
- `gridfront.cursor`: animated cursor `Corner`s, `corners_for_shape` and
  `cursor_destination`.
- `gridfront.blink`: `BlinkStatus`, the cursor blink state machine.
- `gridfront.cursor_vfx`: `VfxMode`, the `PointHighlight` and
  `ParticleTrail` effects and the deterministic `RngState` generator.
- `gridfront.window_state`: `WindowState`, a window's animated position,
  visibility and scroll, and `WindowDrawDetails`.
- `gridfront.layers`: `draw_order`, the order in which windows are drawn.
- `gridfront.running_tracker`: a thread-safe `RunningTracker` flag.

## Installation

```
pip install gridfront
```

## Examples

Parse a geometry string:

```python
from gridfront.window_geometry import parse_window_geometry

size = parse_window_geometry("120x40")
print(size.width, size.height)  # 120 40
```

Ease between two points:

```python
from gridfront.animation import ease_point, ease_out_expo
from gridfront.geometry import Point

halfway = ease_point(ease_out_expo, Point(0.0, 0.0), Point(10.0, 4.0), 0.5)
```

Parse a font setting:

```python
from gridfront.font_options import FontOptions

options = FontOptions.parse("Fira Code,Noto Sans:h12:b")
print(options.font_list, options.bold)  # ['Fira Code', 'Noto Sans'] True
```

Store and read a setting group:

```python
from gridfront.config import WindowSettings
from gridfront.settings import Settings

settings = Settings()
settings.set(WindowSettings(refresh_rate=144))
print(settings.get(WindowSettings).refresh_rate)  # 144
```

Build keybindings:

```python
from gridfront.config import KeyboardSettings
from gridfront.keyboard import Key, KeyEvent, KeyboardManager, Modifiers

sent = []
keyboard = KeyboardManager(sent.append, keyboard_settings=KeyboardSettings, is_macos=False)
keyboard.handle_modifiers_changed(Modifiers(ctrl=True))
keyboard.handle_key_event(KeyEvent(logical_key=Key.TAB))
print(keyboard.handle_events_cleared())  # ['<C-Tab>']
```

## What the package does not do

`gridfront` computes state only. It does not open a window, draw anything,
load or shape fonts, talk to an editor process by itself, or handle mouse
input; those are left to the application that uses it. It provides no
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```