"""Choosing the menu layout, font size and page sizes from the theme's settings."""

from __future__ import annotations

from dataclasses import dataclass

SIMPLE = 0
TRADITIONAL = 1
DRUNKEN_MONKEY = 2
CUSTOM = 3


@dataclass(frozen=True)
class LayoutSizes:
    """Item counts and font sizes a theme gives for each layout."""

    base_font: int
    font_size_custom: int
    items_in_simple: int
    items_in_full_simple: int
    items_in_traditional: int
    items_in_full_traditional: int
    items_in_drunken_monkey: int
    items_in_full_drunken_monkey: int
    items_in_custom: int
    items_in_full_custom: int


@dataclass(frozen=True)
class Layout:
    """The layout in effect and how many items fit on a page."""

    mode: int
    font_size: int
    menu_items_per_page: int
    fullscreen_items_per_page: int
    items_per_page: int


def choose_layout(mode: int, sizes: LayoutSizes, fullscreen: bool) -> Layout:
    """Use the requested layout if the theme supports it, else fall back to custom."""
    if mode == SIMPLE and sizes.items_in_simple > 0:
        chosen = (SIMPLE, sizes.base_font, sizes.items_in_simple, sizes.items_in_full_simple)
    elif mode == TRADITIONAL and sizes.items_in_traditional > 0:
        chosen = (
            TRADITIONAL,
            sizes.base_font - 2,
            sizes.items_in_traditional,
            sizes.items_in_full_traditional,
        )
    elif mode == DRUNKEN_MONKEY and sizes.items_in_drunken_monkey > 0:
        chosen = (
            DRUNKEN_MONKEY,
            sizes.base_font - 4,
            sizes.items_in_drunken_monkey,
            sizes.items_in_full_drunken_monkey,
        )
    else:
        chosen = (CUSTOM, sizes.font_size_custom, sizes.items_in_custom, sizes.items_in_full_custom)
    chosen_mode, font_size, menu_items, fullscreen_items = chosen
    return Layout(
        mode=chosen_mode,
        font_size=font_size,
        menu_items_per_page=menu_items,
        fullscreen_items_per_page=fullscreen_items,
        items_per_page=fullscreen_items if fullscreen else menu_items,
    )