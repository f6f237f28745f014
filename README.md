# simplemenu

The logic behind a lightweight game launcher for handheld consoles, as a
small Python library with no dependencies outside the standard library.

## Modules

- `simplemenu.names`: path and extension handling for ROM files, and the
  "tidy" names that drop region and revision tags such as `(USA)` or `[!]`
  (`get_extension`, `get_name_without_path`, `get_game_name`,
  `strip_game_name`, `strip_alias`, `sort_key`, ...).
- `simplemenu.roms`: the `Rom`, `Favorite` and `SectionState` records;
  display names (`display_name`), menu ordering (`sort_roms`,
  `rom_sort_key`, `favorite_sort_key`), favorite lookup (`find_favorite`,
  `favorite_exists`), extension filtering (`is_extension_valid`), the saved
  `page-game-paging;` state string (`parse_sections_state`,
  `format_sections_state`) and custom link files with `title=` and `exec=`
  lines (`parse_gmenu_link`).
- `simplemenu.layout`: `choose_layout` picks the list layout (simple,
  traditional, drunken monkey or custom), its font size and items per page
  from a theme's `LayoutSizes`, falling back to custom when the theme does
  not support the requested layout.
- `simplemenu.screen_text`: header text framed by the CPU mode, the
  `GAME n of m` footer, the compact `n/m` counter, the alphabetical letter
  bar with its colours, and the path of a game's picture.
- `simplemenu.settings`: `settings_rows` builds the rows of the settings
  screen (`SettingsRow` with `label`, `value`, `hint` and `text`).
- `simplemenu.hardware`: `CpuMode` and `next_cpu_mode`, clock register
  values (`bittboy_pll_setting`, `jz_cpu_register_value`), battery level
  from voltages (`battery_percentage`, `read_battery_level`), a file-backed
  `Backlight`, and a `SuspendController` that dims the screen and lowers the
  CPU mode, then restores both.
- `simplemenu.applog`: `LaunchLog`, an optional log written to
  `YYYY-MM-DD.log` in `$HOME/.simplemenu` (see `default_log_directory`).

## Examples

Tidy ROM names:

```python
from simplemenu.names import get_extension, strip_game_name

get_extension("Super Game (USA).sfc")               # ".sfc"
strip_game_name("/roms/snes/Super Game (USA).sfc")  # "Super Game"
```

Order games the way the menu lists them:

```python
from simplemenu.roms import Rom, display_name, sort_roms

roms = [
    Rom("/roms/snes/Zeta Quest (Europe).sfc"),
    Rom("/roms/snes/alpha run (USA).sfc"),
]
for rom in sort_roms(roms, has_alias_file=False):
    print(display_name(rom))   # "alpha run", then "Zeta Quest"
```

Save and restore where the cursor was in each section:

```python
from simplemenu.roms import SectionState, format_sections_state, parse_sections_state

text = format_sections_state([SectionState(2, 5, 0), SectionState(0, 1, 1)])
# "2-5-0;0-1-1;"
parse_sections_state(text)
```

Choose a layout:

```python
from simplemenu.layout import LayoutSizes, TRADITIONAL, choose_layout

sizes = LayoutSizes(
    base_font=14, font_size_custom=12,
    items_in_simple=10, items_in_full_simple=12,
    items_in_traditional=8, items_in_full_traditional=12,
    items_in_drunken_monkey=0, items_in_full_drunken_monkey=0,
    items_in_custom=9, items_in_full_custom=12,
)
layout = choose_layout(TRADITIONAL, sizes, fullscreen=False)
# layout.font_size == 12, layout.items_per_page == 8
```

Screen text and the settings screen:

```python
from simplemenu.hardware import CpuMode
from simplemenu.screen_text import footer_text, header_text
from simplemenu.settings import settings_rows

header_text("SNES", CpuMode.OVERCLOCK)        # "+ SNES +"
footer_text(0, 10, 1, 42, has_rom=True)       # "GAME 11 of 42"

for row in settings_rows(
    strip_games=True, footer_visible=True, menu_visible=True,
    theme="/themes/default", timeout=30, hdmi_enabled=False,
    hdmi_changed=False, shutdown_enabled=False, shutdown_option=0,
    auto_hide_logos=True,
):
    print(row.text)
```

Device helpers:

```python
from simplemenu.hardware import Backlight, SuspendController, battery_percentage

battery_percentage(3900, 3400, 4200)   # 62

controller = SuspendController(Backlight("/sys/class/backlight/brightness"), timeout=30)
controller.suspend()   # saves the brightness, writes 0, CPU mode becomes SLEEP
controller.resume()    # writes the saved brightness back
```

## What this package does not do

It holds the launcher's naming, ordering, layout and text logic only. It does
not scan ROM directories or keep a game-list cache, does not read OPK
packages, does not draw anything or handle input, does not start emulators,
and has no command to run. Timers are not included either: the caller
decides when `SuspendController.suspend` and `resume` are called.

## Requirements

Python 3.10 or later.