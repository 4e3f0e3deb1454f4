"""Command entry point: pick a browser for a URL, or register as a browser."""

from __future__ import annotations

import logging
import sys
import tkinter
from collections.abc import Iterable, Sequence
from pathlib import Path

from PIL import Image

from .config import Config
from .gui import PickerWindow
from .picker import Picker
from .registry import register_browser

log = logging.getLogger(__name__)

_ICON_CANDIDATES = (
    Path("src/assets/app_icon/app_icon.png"),
    Path("assets/app_icon/app_icon.png"),
)


def _default_search_dirs() -> list[Path]:
    dirs = [Path.cwd()]
    if sys.argv and sys.argv[0]:
        dirs.append(Path(sys.argv[0]).resolve().parent)
    return dirs


def find_app_icon(search_dirs: Iterable[str | Path] | None = None) -> Path | None:
    """Return the first readable application icon under the search directories."""
    dirs = _default_search_dirs() if search_dirs is None else [Path(d) for d in search_dirs]
    for directory in dirs:
        for relative in _ICON_CANDIDATES:
            candidate = directory / relative
            try:
                with Image.open(candidate) as image:
                    image.load()
            except (OSError, ValueError):
                continue
            log.info("Successfully loaded icon image from: %s", candidate)
            return candidate
    log.error("Failed to load application icon from any location")
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """With a URL, show the picker for it; without one, register as a browser."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = list(sys.argv[1:] if argv is None else argv)

    if args:
        url = args[0]
        try:
            picker = Picker.from_system(url, Config.load())
            window = PickerWindow(picker)
            icon = find_app_icon()
            window.icon_path = str(icon) if icon is not None else None
            window.run()
        except tkinter.TclError as exc:
            log.error("Failed to run application: %s", exc)
            return 1
        return 0

    try:
        register_browser()
    except OSError as exc:
        log.error("Failed to register browser: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())