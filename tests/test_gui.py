import pytest

from browsea.config import Config
from browsea.gui import PickerWindow, hex_color
from browsea.picker import BrowserEntry, Picker
from browsea.theme import Theme


def _parse(color):
    return tuple(int(color[i:i + 2], 16) for i in (1, 3, 5))


def test_hex_color_matches_light_background():
    assert hex_color(Theme.light().background) == "#6a8edb"


def test_hex_color_black():
    assert hex_color((0, 0, 0)) == "#000000"


@pytest.mark.parametrize("theme", [Theme.light(), Theme.dark()])
def test_hex_color_round_trips_theme_colours(theme):
    for rgb in (
        theme.background,
        theme.foreground,
        theme.primary,
        theme.secondary,
        theme.accent,
        theme.button_bg,
        theme.button_hover,
    ):
        color = hex_color(rgb)
        assert len(color) == 7
        assert color.startswith("#")
        assert _parse(color) == rgb


@pytest.mark.parametrize("bad", [(256, 0, 0), (-1, 0, 0), (1, 2), (1, 2, 3, 4)])
def test_hex_color_rejects_invalid(bad):
    with pytest.raises(ValueError):
        hex_color(bad)


def _window():
    picker = Picker("https://example.com", Config(), [BrowserEntry("Chrome", "chrome.exe")])
    return PickerWindow(picker)


def test_show_settings_switches_page_without_open_window():
    window = _window()
    window.show_settings()
    assert window.picker.show_settings is True


def test_show_picker_returns_from_settings():
    window = _window()
    window.show_settings()
    window.show_picker()
    assert window.picker.show_settings is False


def test_window_keeps_picker_state():
    window = _window()
    assert window.picker.url == "https://example.com"
    assert [entry.name for entry in window.picker.browsers] == ["Chrome"]