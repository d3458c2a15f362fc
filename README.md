# glframe

Building blocks for a small windowed application framework. None of them
needs a window or a graphics context.

- `glframe.base` provides `Color`, `Region`, `Point` and `ScreenInfo`.
  - `Color` is a frozen RGBA colour with 8-bit channels. Use
    `Color.from_int` for a packed `0xRRGGBBAA` value and `Color.from_vec`
    for 3 or 4 components in the range 0..1. `to_vec3` and `to_vec4`
    convert back to floats, and `int(color)` packs the colour again.
    Channels outside 0..255 raise `ValueError`.
  - A `Region` can be given in fractions of the window (`screen_ratio=True`,
    the default) or in pixels. Its edges on screen are resolved against a
    `ScreenInfo` with `left`, `top`, `right`, `bottom` and `width`. A region
    whose bottom edge is zero or negative is square: it stores a bottom of
    `0` and its height follows its width. `set_bottom` with a positive value
    leaves square mode, and `set_square` switches square mode on or off.
    `origin_bottom`, `origin_width` and `origin_height` give sizes in the
    region's own coordinates.
  - A `Point` resolves with `x_on` and `y_on`. `to_ratio` returns the stored
    coordinates divided by the window size when the point is in ratio mode.
- `glframe.lang` provides the `Language` enum, `language_code` and
  `language_from_code`. An unknown code maps to Simplified Chinese.
  `format_text` fills the `{0}`, `{1}`, … placeholders of a template with
  `replace_placeholders`. A template that starts with
  `"Missing translation"` is returned unchanged. `to_text` renders a value
  the way it is substituted into the template: floats get six decimals and
  booleans become `0` or `1`.
- `glframe.log` provides the `Level` enum and `level_to_string`.
  `format_value`, `format_point`, `format_region` and `format_screen_info`
  give the text that log lines show for these values. `format_value`
  raises `TypeError` for anything that is not a string, byte string or
  number.
- `glframe.config_items` holds the names of the standard settings, such as
  `WINDOW_WIDTH`, `VOLUME`, `LANG` and `UI_REGION_EXIT`, and the
  `BoolConfig` switches.
  - `bool_config_from_name` maps a setting name to its switch.
  - `load_bools` reads the in-window, debug and show-FPS switches from any
    mutable mapping, and `store_bools` writes them back.
  - `apply_default_settings` fills in every missing setting: language,
    window size (half the screen), position, vertical sync, title, debug,
    FPS display, volume and the two exit-button regions. It returns the
    chosen `Language` and the loaded switches.
- `glframe.editing` provides `EditMode` and `EditHandle`, which describe
  which part of a widget's region a drag moves or resizes.
  `EditHandle.hidden()` gives an empty handle that is not shown.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from glframe.base import Color, Region, ScreenInfo
from glframe.lang import Language, language_code, format_text
from glframe.config_items import apply_default_settings, WINDOW_WIDTH

window = ScreenInfo(width=1920, height=1080)

exit_button = Region(0.9, 0.03, 0.95, -1)   # square region
print(exit_button.left(window), exit_button.bottom(window))

print(int(Color.from_int(0xFF0000FF)))       # 4278190335
print(language_code(Language.ENGLISH))       # en-US
print(format_text("Hello {0}, you have {1} messages", "Ann", 3))

settings = {}
language, switches = apply_default_settings(settings, 1920, 1080, "en-US", "Demo")
print(language, settings[WINDOW_WIDTH])     # Language.ENGLISH 960
```

## What it does not do

The package opens no windows and does no drawing, audio or video. Settings
live in whatever mapping you pass in. Reading them from a file and saving
them back is up to the caller. The log helpers only produce text and do not
write a log file. There is no translation table: `format_text` fills a
template you supply. There is no command to run.