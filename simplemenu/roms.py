"""Roms, favorites and the small text formats the menu keeps them in."""

from __future__ import annotations

import os
from dataclasses import dataclass

from simplemenu.names import sort_key, strip_game_name


@dataclass
class Rom:
    """A launchable game: its path or command, optional alias and directory."""

    name: str
    alias: str | None = None
    directory: str = ""


@dataclass
class Favorite:
    """A game the user marked as a favorite."""

    name: str
    alias: str = ""
    section: str = ""
    files_directory: str = ""


@dataclass
class SectionState:
    """Where the cursor was in a section when the menu was left."""

    current_page: int = 0
    current_game_in_page: int = 0
    alphabetical_paging: int = 0


def _has_alias(rom: Rom) -> bool:
    return rom.alias is not None and len(rom.alias) > 2


def display_name(rom: Rom) -> str:
    """The alias when there is a usable one, else the stripped file name."""
    if _has_alias(rom) and rom.alias != " ":
        name = rom.alias
    else:
        name = rom.name
    if name == rom.name:
        name = strip_game_name(name)
    return name


def rom_sort_key(rom: Rom, has_alias_file: bool) -> str:
    """Case-insensitive ordering key; file names are stripped without an alias file."""
    key = sort_key(rom.alias if _has_alias(rom) else rom.name)
    if not has_alias_file:
        key = strip_game_name(key)
    return key


def sort_roms(roms: list[Rom], has_alias_file: bool) -> list[Rom]:
    """Return the roms in menu order; equal keys keep their original order."""
    return sorted(roms, key=lambda rom: rom_sort_key(rom, has_alias_file))


def favorite_sort_key(favorite: Favorite) -> str:
    """Ordering key of a favorite: its alias, or its stripped name, lower-cased."""
    if len(favorite.alias) > 1:
        text = favorite.alias
    else:
        text = strip_game_name(favorite.name)
    return text.lower()


def find_favorite(favorites: list[Favorite], name: str) -> Favorite | None:
    """The favorite whose name is exactly ``name``, or None."""
    return next((favorite for favorite in favorites if favorite.name == name), None)


def favorite_exists(favorites: list[Favorite], name: str) -> bool:
    """Whether some favorite's name occurs within ``name``."""
    return any(favorite.name in name for favorite in favorites)


def is_extension_valid(extension: str, extensions: str) -> bool:
    """Whether ``extension`` is one of the comma separated ``extensions``."""
    return extension in (token for token in extensions.split(",") if token)


def _atoi(text: str) -> int:
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def parse_sections_state(states: str) -> list[SectionState]:
    """Decode ``page-game-paging;`` groups, one per section."""
    result = []
    for group in (token for token in states.split(";") if token):
        state = SectionState()
        for position, part in enumerate(token for token in group.split("-") if token):
            value = _atoi(part)
            if position == 0:
                state.current_page = value
            elif position == 1:
                state.current_game_in_page = value
            else:
                state.alphabetical_paging = value
        result.append(state)
    return result


def format_sections_state(sections: list[SectionState]) -> str:
    """Encode section states in the form :func:`parse_sections_state` reads."""
    return "".join(
        f"{state.current_page}-{state.current_game_in_page}-{state.alphabetical_paging};"
        for state in sections
    )


def _second_token(line: str) -> str:
    tokens = [token for token in line.split("=") if token]
    if len(tokens) < 2:
        raise ValueError(f"no value in link line {line!r}")
    return tokens[1].rstrip("\n")


def parse_gmenu_link(path: str | os.PathLike) -> tuple[str, str]:
    """Read the ``title`` and ``exec`` values of a custom link file."""
    title = ""
    command = ""
    with open(path, encoding="utf-8", errors="replace") as link:
        for line in link:
            if "title" in line:
                title = _second_token(line)
            elif "exec" in line:
                command = _second_token(line)
                break
    return title, command