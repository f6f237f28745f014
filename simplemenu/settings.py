"""Rows of the settings screen: option label, current value and hint."""

from __future__ import annotations

from dataclasses import dataclass

from simplemenu.names import get_name_without_path

SHUTDOWN_OPTION = 0
THEME_OPTION = 1
SCREEN_TIMEOUT_OPTION = 2
TIDY_ROMS_OPTION = 3
AUTO_HIDE_LOGOS_OPTION = 4
FULL_SCREEN_FOOTER_OPTION = 5
FULL_SCREEN_MENU_OPTION = 6
DEFAULT_OPTION = 7
USB_OPTION = 8

_DEFAULT_LAUNCHER_SHUTDOWN = {
    0: ("ShutDown", "A TO SHUTDOWN, LEFT/RIGHT->CHOOSE"),
    1: ("Reboot", "A TO REBOOT, LEFT/RIGHT->CHOOSE"),
}
_PLAIN_SHUTDOWN = {
    0: ("Quit", "A TO QUIT, LEFT/RIGHT->CHOOSE"),
    1: ("Reboot", "A TO REBOOT, LEFT/RIGHT->CHOOSE"),
    2: ("Shutdown", "A TO SHUTDOWN, LEFT/RIGHT->CHOOSE"),
}


@dataclass(frozen=True)
class SettingsRow:
    """One line of the settings screen."""

    label: str
    value: str
    hint: str

    @property
    def text(self) -> str:
        """The label followed by the value, as drawn on screen."""
        return self.label + self.value


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def settings_rows(
    strip_games: bool,
    footer_visible: bool,
    menu_visible: bool,
    theme: str,
    timeout: int,
    hdmi_enabled: bool,
    hdmi_changed: bool,
    shutdown_enabled: bool,
    shutdown_option: int,
    auto_hide_logos: bool,
) -> list[SettingsRow]:
    """Build the settings rows in screen order.

    ``shutdown_enabled`` means the menu is the default launcher, which offers
    only shutdown (0) and reboot (1); otherwise quit (0), reboot (1) and
    shutdown (2) are offered.
    """
    choices = _DEFAULT_LAUNCHER_SHUTDOWN if shutdown_enabled else _PLAIN_SHUTDOWN
    try:
        shutdown_label, shutdown_hint = choices[shutdown_option]
    except KeyError:
        raise ValueError(f"invalid shutdown option {shutdown_option}") from None

    if timeout > 0 and not hdmi_enabled:
        timeout_value = str(timeout)
    else:
        timeout_value = "ALWAYS ON"

    return [
        SettingsRow(shutdown_label, "", shutdown_hint),
        SettingsRow("Theme: ", get_name_without_path(theme), "LAUNCHER THEME"),
        SettingsRow("Screen timeout: ", timeout_value, "SECS UNTIL THE SCREEN TURNS OFF"),
        SettingsRow("Tidy rom names: ", _yes_no(strip_games), "CUT DETAILS OUT OF ROM NAMES"),
        SettingsRow("Auto-hide logos: ", _yes_no(auto_hide_logos), "HIDE LOGOS AFTER A SECOND"),
        SettingsRow(
            "Display fullscreen rom names: ",
            _yes_no(footer_visible),
            "DISPLAY THE CURRENT ROM NAME",
        ),
        SettingsRow(
            "Display fullscreen menu: ",
            _yes_no(menu_visible),
            "DISPLAY A TRANSLUCENT MENU",
        ),
        SettingsRow("Default launcher: ", _yes_no(shutdown_enabled), "LAUNCH AFTER BOOTING"),
        SettingsRow("HDMI: ", _yes_no(hdmi_changed), "ENABLE OR DISABLE HDMI"),
    ]