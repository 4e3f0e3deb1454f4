"""Colour themes for the browser picker window."""

from __future__ import annotations

from dataclasses import dataclass

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """A set of RGB colours used to paint the picker."""

    background: RGB
    foreground: RGB
    primary: RGB
    secondary: RGB
    accent: RGB
    button_bg: RGB
    button_hover: RGB

    @classmethod
    def light(cls) -> Theme:
        return cls(
            background=(106, 142, 219),
            foreground=(32, 32, 32),
            primary=(255, 255, 255),
            secondary=(107, 114, 128),
            accent=(99, 102, 241),
            button_bg=(255, 255, 255),
            button_hover=(240, 240, 240),
        )

    @classmethod
    def dark(cls) -> Theme:
        return cls(
            background=(17, 24, 39),
            foreground=(245, 245, 245),
            primary=(59, 130, 246),
            secondary=(156, 163, 175),
            accent=(129, 140, 248),
            button_bg=(45, 45, 45),
            button_hover=(55, 55, 55),
        )

    @classmethod
    def for_mode(cls, dark: bool) -> Theme:
        """Return the dark theme when ``dark`` is true, else the light one."""
        return cls.dark() if dark else cls.light()