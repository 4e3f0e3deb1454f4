import dataclasses

import pytest

from browsea.theme import Theme


def test_light_colours():
    theme = Theme.light()
    assert theme.background == (106, 142, 219)
    assert theme.foreground == (32, 32, 32)
    assert theme.primary == (255, 255, 255)


def test_dark_colours():
    theme = Theme.dark()
    assert theme.background == (17, 24, 39)
    assert theme.button_bg == (45, 45, 45)
    assert theme.button_hover == (55, 55, 55)


@pytest.mark.parametrize("dark", [True, False])
def test_for_mode_selects_theme(dark):
    expected = Theme.dark() if dark else Theme.light()
    assert Theme.for_mode(dark) == expected


def test_light_and_dark_differ_in_background():
    assert Theme.light().background != Theme.dark().background
    assert Theme.light() == Theme.light()


def test_theme_is_immutable():
    theme = Theme.light()
    with pytest.raises(dataclasses.FrozenInstanceError):
        theme.background = (0, 0, 0)
    assert theme.background == (106, 142, 219)


def test_all_components_are_bytes():
    for theme in (Theme.light(), Theme.dark()):
        for colour in dataclasses.astuple(theme):
            assert len(colour) == 3
            assert all(0 <= c <= 255 for c in colour)