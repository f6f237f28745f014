import dataclasses

import pytest

from simplemenu.layout import (
    CUSTOM,
    DRUNKEN_MONKEY,
    SIMPLE,
    TRADITIONAL,
    LayoutSizes,
    choose_layout,
)

SIZES = LayoutSizes(
    base_font=20,
    font_size_custom=15,
    items_in_simple=10,
    items_in_full_simple=12,
    items_in_traditional=8,
    items_in_full_traditional=9,
    items_in_drunken_monkey=6,
    items_in_full_drunken_monkey=7,
    items_in_custom=5,
    items_in_full_custom=4,
)


def test_simple_layout():
    layout = choose_layout(SIMPLE, SIZES, False)
    assert layout.mode == SIMPLE
    assert layout.font_size == SIZES.base_font
    assert layout.menu_items_per_page == SIZES.items_in_simple
    assert layout.fullscreen_items_per_page == SIZES.items_in_full_simple
    assert layout.items_per_page == SIZES.items_in_simple


def test_traditional_layout_uses_smaller_font():
    layout = choose_layout(TRADITIONAL, SIZES, False)
    assert layout.mode == TRADITIONAL
    assert layout.font_size == SIZES.base_font - 2
    assert layout.menu_items_per_page == SIZES.items_in_traditional
    assert layout.fullscreen_items_per_page == SIZES.items_in_full_traditional


def test_drunken_monkey_layout_uses_smallest_font():
    layout = choose_layout(DRUNKEN_MONKEY, SIZES, False)
    assert layout.mode == DRUNKEN_MONKEY
    assert layout.font_size == SIZES.base_font - 4
    assert layout.menu_items_per_page == SIZES.items_in_drunken_monkey


@pytest.mark.parametrize(
    "mode, field",
    [
        (SIMPLE, "items_in_simple"),
        (TRADITIONAL, "items_in_traditional"),
        (DRUNKEN_MONKEY, "items_in_drunken_monkey"),
    ],
)
def test_unsupported_layout_falls_back_to_custom(mode, field):
    sizes = dataclasses.replace(SIZES, **{field: 0})
    layout = choose_layout(mode, sizes, False)
    assert layout.mode == CUSTOM
    assert layout.font_size == sizes.font_size_custom
    assert layout.menu_items_per_page == sizes.items_in_custom
    assert layout.fullscreen_items_per_page == sizes.items_in_full_custom


@pytest.mark.parametrize("mode", [CUSTOM, 7, -1])
def test_other_modes_are_custom(mode):
    layout = choose_layout(mode, SIZES, False)
    assert layout.mode == CUSTOM
    assert layout.font_size == SIZES.font_size_custom


@pytest.mark.parametrize("mode", [SIMPLE, TRADITIONAL, DRUNKEN_MONKEY, CUSTOM])
def test_fullscreen_uses_fullscreen_page_size(mode):
    windowed = choose_layout(mode, SIZES, False)
    full = choose_layout(mode, SIZES, True)
    assert windowed.items_per_page == windowed.menu_items_per_page
    assert full.items_per_page == full.fullscreen_items_per_page
    assert full.mode == windowed.mode
    assert full.font_size == windowed.font_size