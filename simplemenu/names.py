"""Helpers that turn rom file paths into names fit for display."""

from __future__ import annotations

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def sort_key(text: str) -> str:
    """Case-insensitive key used to order names."""
    return text.translate(_ASCII_LOWER)


def replace_word(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``, left to right."""
    if not old:
        raise ValueError("the word to replace must not be empty")
    return text.replace(old, new)


def get_extension(name: str) -> str | None:
    """Return the text from the last dot on, or None when there is no dot."""
    dot = name.rfind(".")
    return None if dot == -1 else name[dot:]


def get_rom_path(name: str) -> str:
    """Return everything before the last slash."""
    slash = name.rfind("/")
    return name if slash == -1 else name[:slash]


def get_name_without_extension(name: str) -> str:
    """Return everything before the last dot."""
    dot = name.rfind(".")
    return name if dot == -1 else name[:dot]


def _cut_before(text: str, index: int) -> str:
    """Cut at ``index``, also dropping one space right before it."""
    if index > 0 and text[index - 1] == " ":
        return text[: index - 1]
    return text[:index]


def strip_alias(name: str) -> str:
    """Drop a trailing parenthesised part and any alternate name after a slash."""
    result = name
    paren = result.rfind("(")
    if paren != -1:
        result = _cut_before(result, paren)
    slash = result.find("/")
    if slash != -1:
        result = _cut_before(result, slash)
    return result


def get_name_without_path(name: str) -> str:
    """Return the part after the last slash; aliases holding " / " are kept whole."""
    if " / " in name:
        return name
    slash = name.rfind("/")
    return name if slash == -1 else name[slash + 1:]


def get_game_name(name: str) -> str:
    """Return the file name without directory and without extension."""
    return get_name_without_path(get_name_without_extension(name))


def _cut_at_details(name: str) -> str:
    for index, char in enumerate(name):
        if char in "([":
            return name[: index - 1] if index > 0 else name
    return name


def strip_game_name(name: str) -> str:
    """Return the bare game name: no path, no extension, no bracketed details."""
    return _cut_at_details(get_game_name(name))


def strip_game_name_leave_extension(name: str) -> str:
    """Like :func:`strip_game_name` but the extension is not removed first."""
    return _cut_at_details(get_name_without_path(name))


def position_where_game_name_starts(path: str) -> int:
    """Index of the first character after the last slash of ``path``."""
    return path.rfind("/") + 1