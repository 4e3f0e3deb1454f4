"""Registration of the picker as a Windows web browser."""

from __future__ import annotations

import logging
import os
import sys
from typing import NamedTuple, Protocol

log = logging.getLogger(__name__)

APP_NAME = "Browsea"
APP_DESCRIPTION = "Choose which browser to open links with"
CLASSES_KEY = r"Software\Classes\Browsea"
CLIENT_KEY = r"Software\Clients\StartMenuInternet\Browsea"
REGISTERED_APPS_KEY = r"Software\RegisteredApplications"


class RegistryEntry(NamedTuple):
    """A string value to store under HKEY_CURRENT_USER; name '' is the default."""

    subkey: str
    name: str
    value: str


class RegistryWriter(Protocol):
    def set_value(self, subkey: str, name: str, value: str) -> None: ...


class WindowsRegistryWriter:
    """Writes string values below HKEY_CURRENT_USER."""

    def set_value(self, subkey: str, name: str, value: str) -> None:
        try:
            import winreg
        except ImportError as exc:
            raise OSError("the Windows registry is not available") from exc
        with winreg.CreateKey(winreg.HKEY_CURRENT_USER, subkey) as key:
            winreg.SetValueEx(key, name, 0, winreg.REG_SZ, value)


def registration_entries(exe_path: str) -> list[RegistryEntry]:
    """Return every registry value needed to register ``exe_path`` as a browser."""
    command = f'"{exe_path}" "%1"'
    return [
        RegistryEntry(CLASSES_KEY, "", APP_NAME),
        RegistryEntry(CLASSES_KEY + r"\Capabilities", "ApplicationName", APP_NAME),
        RegistryEntry(CLASSES_KEY + r"\Capabilities", "ApplicationDescription", APP_DESCRIPTION),
        RegistryEntry(CLASSES_KEY + r"\Capabilities\URLAssociations", "http", APP_NAME),
        RegistryEntry(CLASSES_KEY + r"\Capabilities\URLAssociations", "https", APP_NAME),
        RegistryEntry(CLASSES_KEY + r"\shell\open\command", "", command),
        RegistryEntry(CLIENT_KEY, "", APP_NAME),
        RegistryEntry(CLIENT_KEY + r"\Capabilities", "ApplicationName", APP_NAME),
        RegistryEntry(CLIENT_KEY + r"\Capabilities", "ApplicationDescription", APP_DESCRIPTION),
        RegistryEntry(CLIENT_KEY + r"\shell\open\command", "", command),
        RegistryEntry(REGISTERED_APPS_KEY, APP_NAME, CLASSES_KEY + r"\Capabilities"),
    ]


def register_browser(
    exe_path: str | None = None,
    writer: RegistryWriter | None = None,
) -> list[RegistryEntry]:
    """Register the program as a browser; raises OSError on failure."""
    path = exe_path if exe_path is not None else os.path.abspath(sys.argv[0])
    target = writer if writer is not None else WindowsRegistryWriter()
    entries = registration_entries(path)
    for entry in entries:
        target.set_value(entry.subkey, entry.name, entry.value)
    log.info("Browser registered successfully!")
    return entries