"""Texts and colours the menu screen shows: header, footer, letter bar, pictures."""

from __future__ import annotations

from simplemenu.hardware import CpuMode
from simplemenu.names import get_game_name

Color = tuple[int, int, int]

LETTERS = ("#",) + tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

ABSENT_LETTER_COLOR: Color = (40, 40, 40)
PRESENT_LETTER_COLOR: Color = (255, 255, 255)
CURRENT_LETTER_COLOR: Color = (255, 0, 0)

_GAME_NUMBER_WIDTH = 9


def header_text(section_name: str, cpu_mode: CpuMode) -> str:
    """Section name framed by the CPU mode: ``- x -`` underclocked, ``+ x +`` overclocked."""
    if cpu_mode is CpuMode.UNDERCLOCK:
        return f"- {section_name} -"
    if cpu_mode is CpuMode.NORMAL:
        return section_name
    return f"+ {section_name} +"


def footer_text(
    current_game_in_page: int,
    items_per_page: int,
    current_page: int,
    game_count: int,
    has_rom: bool,
) -> str:
    """The ``GAME n of m`` footer; numbering starts at 1 when a rom is selected."""
    number = current_game_in_page + items_per_page * current_page
    if has_rom:
        number += 1
    return f"GAME {number} of {game_count}"


def custom_game_number(
    current_game_in_page: int,
    items_per_page: int,
    current_page: int,
    game_count: int,
) -> str:
    """The compact ``n/m`` counter of custom layouts, at most nine characters."""
    number = current_game_in_page + items_per_page * current_page + 1 if game_count > 0 else 0
    return f"{number}/{game_count}"[:_GAME_NUMBER_WIDTH]


def first_letter(name: str) -> str:
    """Upper-cased first character of ``name``; digits become ``#``."""
    if not name:
        return ""
    letter = name[0].upper()
    if letter in "0123456789":
        return "#"
    return letter


def letter_bar(current_letter: str, existing_letters: str) -> list[tuple[str, Color]]:
    """Each alphabetical-paging letter with the colour it is drawn in."""
    bar = []
    for letter in LETTERS:
        if letter == current_letter:
            color = CURRENT_LETTER_COLOR
        elif letter in existing_letters:
            color = PRESENT_LETTER_COLOR
        else:
            color = ABSENT_LETTER_COLOR
        bar.append((letter, color))
    return bar


def picture_path(directory: str, media_folder: str, name: str) -> str:
    """Path of the ``.png`` picture shown for the game ``name``."""
    return f"{directory}{media_folder}/{get_game_name(name)}.png"