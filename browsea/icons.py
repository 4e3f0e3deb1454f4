"""Browser and theme icons, with generated fallbacks."""

from __future__ import annotations

import hashlib
import logging
import sys
from pathlib import Path

from PIL import Image

log = logging.getLogger(__name__)

FALLBACK_SIZE = 32
MAX_ICON_SIZE = 512

_ICON_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("chrome",), "chrome.png"),
    (("firefox", "mozilla"), "firefox.png"),
    (("edge",), "edge.png"),
    (("opera",), "opera.png"),
    (("safari",), "safari.png"),
    (("brave",), "brave.png"),
    (("internet explorer", "iexplore"), "ie.png"),
)


def get_browser_icon_path(browser_name: str) -> str | None:
    """Return the bundled icon path matching a browser name, if any."""
    name = browser_name.lower()
    for needles, icon in _ICON_RULES:
        if any(needle in name for needle in needles):
            return f"src/assets/browser_icons/{icon}"
    return None


def _program_dir() -> Path | None:
    if not sys.argv or not sys.argv[0]:
        return None
    return Path(sys.argv[0]).resolve().parent


def find_icon_file(base_path: str) -> str | None:
    """Look for ``base_path`` in the working directory, then next to the program."""
    candidates = [base_path]
    program_dir = _program_dir()
    if program_dir is not None:
        candidates.append(str(program_dir / base_path))
    return next((path for path in candidates if Path(path).exists()), None)


def fallback_color(name: str) -> tuple[int, int, int]:
    """Derive a stable RGB colour from a name."""
    digest = hashlib.sha256(name.encode("utf-8")).digest()
    value = int.from_bytes(digest[:8], "little")
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def create_fallback_icon(name: str, size: int = FALLBACK_SIZE) -> Image.Image:
    """Return a square of the name's colour, fully opaque."""
    return Image.new("RGBA", (size, size), (*fallback_color(name), 255))


def load_and_process_image(path: str) -> Image.Image | None:
    """Open an image and scale it to fit 512x512, keeping its aspect ratio."""
    try:
        with Image.open(path) as opened:
            image = opened.convert("RGBA")
    except (OSError, ValueError):
        log.warning("Failed to open image at: %s", path)
        return None
    width, height = image.size
    ratio = min(MAX_ICON_SIZE / width, MAX_ICON_SIZE / height)
    new_size = (max(1, round(width * ratio)), max(1, round(height * ratio)))
    return image.resize(new_size, Image.Resampling.LANCZOS)


def _load_icon(icon_path: str, label: str) -> Image.Image | None:
    found = find_icon_file(icon_path)
    if found is None:
        log.info("Could not find icon: %s", label)
        return None
    log.info("Found icon at: %s", found)
    return load_and_process_image(found)


def load_browser_icon(browser_name: str, path: str | None = None) -> Image.Image:
    """Return the browser's bundled icon, or a coloured fallback square."""
    icon_path = get_browser_icon_path(browser_name)
    if icon_path is not None:
        image = _load_icon(icon_path, browser_name)
        if image is not None:
            return image
    return create_fallback_icon(browser_name)


def load_theme_icon(icon_name: str) -> Image.Image:
    """Return a theme icon such as 'sun' or 'moon', or a coloured fallback."""
    image = _load_icon(f"src/assets/theme_icons/{icon_name}.png", icon_name)
    return image if image is not None else create_fallback_icon(icon_name)