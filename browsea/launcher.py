"""Start a browser executable with a URL."""

from __future__ import annotations

import logging
import subprocess

log = logging.getLogger(__name__)


class LaunchError(Exception):
    """Raised when a browser process cannot be started."""


def launch_browser(browser_path: str, url: str) -> subprocess.Popen:
    """Start ``browser_path`` with ``url`` as its only argument."""
    try:
        process = subprocess.Popen([browser_path, url])
    except OSError as exc:
        message = f"Failed to launch browser: {browser_path} - Error: {exc}"
        log.error(message)
        raise LaunchError(message) from exc
    log.info("Successfully launched browser: %s", browser_path)
    return process