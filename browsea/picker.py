"""State and actions of the browser picker, independent of any toolkit."""

from __future__ import annotations

import logging
import math
import os
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, TypeVar

from PIL import Image

from .browsers import get_installed_browsers
from .config import Config
from .icons import load_browser_icon, load_theme_icon
from .launcher import launch_browser
from .theme import Theme

log = logging.getLogger(__name__)

ICON_SIZE = 60.0
GRID_SPACING = 8.0

T = TypeVar("T")


@dataclass
class BrowserEntry:
    """A browser shown in the picker: name, executable path and optional icon."""

    name: str
    path: str
    icon: Image.Image | None = None


class GridLayout(NamedTuple):
    """How browser buttons are arranged in the picker grid."""

    items_per_row: int
    rows: int
    vertical_padding: float

    def chunk(self, items: Sequence[T]) -> list[list[T]]:
        """Split ``items`` into rows of at most ``items_per_row`` each."""
        step = self.items_per_row
        return [list(items[start:start + step]) for start in range(0, len(items), step)]


def grid_layout(available_width: float, available_height: float, count: int) -> GridLayout:
    """Work out columns, rows and top padding for ``count`` browser buttons."""
    cell = ICON_SIZE + GRID_SPACING
    items_per_row = max(1, math.floor(available_width / cell))
    rows = math.ceil(count / items_per_row)
    total_height = rows * cell
    return GridLayout(items_per_row, rows, (available_height - total_height) / 2.0)


class Picker:
    """The URL to open, the known browsers and the user's settings."""

    def __init__(
        self,
        url: str,
        config: Config | None = None,
        browsers: Iterable[BrowserEntry] = (),
    ) -> None:
        self.url = url
        self.config = config if config is not None else Config()
        self.browsers: list[BrowserEntry] = list(browsers)
        self.show_settings = False
        self.dark_mode = False
        self.sun_icon: Image.Image | None = None
        self.moon_icon: Image.Image | None = None

    @classmethod
    def from_system(cls, url: str, config: Config | None = None) -> Picker:
        """Build a picker from installed browsers plus the configured custom ones."""
        settings = config if config is not None else Config.load()
        found = get_installed_browsers() + list(settings.custom_browsers)
        entries = [
            BrowserEntry(name, path, load_browser_icon(name, path)) for name, path in found
        ]
        picker = cls(url, settings, entries)
        picker.sun_icon = load_theme_icon("sun")
        picker.moon_icon = load_theme_icon("moon")
        return picker

    @property
    def theme(self) -> Theme:
        """The colour theme matching the current mode."""
        return Theme.for_mode(self.dark_mode)

    def _save(self) -> None:
        try:
            self.config.save()
        except OSError as exc:
            log.warning("Failed to save configuration: %s", exc)

    def is_visible(self, name: str) -> bool:
        """Whether the browser called ``name`` is shown in the picker."""
        return name not in self.config.hidden_browsers

    def visible_browsers(self) -> list[BrowserEntry]:
        """The browsers that are not hidden, in their listed order."""
        return [entry for entry in self.browsers if self.is_visible(entry.name)]

    def set_visible(self, name: str, visible: bool) -> bool:
        """Show or hide a browser; saves and returns True if anything changed."""
        if self.is_visible(name) == visible:
            return False
        if visible:
            self.config.hidden_browsers = [
                hidden for hidden in self.config.hidden_browsers if hidden != name
            ]
        else:
            self.config.hidden_browsers.append(name)
        self._save()
        return True

    def remove_browsers(self, indices: Iterable[int]) -> list[BrowserEntry]:
        """Remove the browsers at ``indices`` and unhide their names."""
        removed: list[BrowserEntry] = []
        for index in sorted(set(indices), reverse=True):
            entry = self.browsers.pop(index)
            self.config.hidden_browsers = [
                hidden for hidden in self.config.hidden_browsers if hidden != entry.name
            ]
            removed.append(entry)
        if removed:
            self._save()
        removed.reverse()
        return removed

    def add_custom_browser(self, path: str | os.PathLike) -> BrowserEntry:
        """Add an executable as a browser named after its file stem and save it."""
        file_path = Path(path)
        name = file_path.stem
        if not name:
            raise ValueError(f"not a file path: {str(path)!r}")
        entry = BrowserEntry(name, str(file_path))
        self.browsers.append(entry)
        self.config.custom_browsers.append((entry.name, entry.path))
        self._save()
        return entry

    def toggle_dark_mode(self) -> bool:
        """Switch between light and dark mode; returns the new mode."""
        self.dark_mode = not self.dark_mode
        return self.dark_mode

    def launch(self, index: int) -> subprocess.Popen:
        """Open the URL in the browser at ``index``; raises LaunchError on failure."""
        entry = self.browsers[index]
        return launch_browser(entry.path, self.url)