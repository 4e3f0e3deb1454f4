"""Discovery of installed web browsers via the registry and the filesystem."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Mapping, Sequence

Browser = tuple[str, str]
RegistryReader = Callable[[str, str], "str | None"]

REGISTRY_ROOTS = ("HKEY_LOCAL_MACHINE", "HKEY_CURRENT_USER")

_START_MENU = "Software\\Clients\\StartMenuInternet"
_APP_PATHS = "Software\\Microsoft\\Windows\\CurrentVersion\\App Paths"


def _client_command(client: str) -> str:
    return "\\".join((_START_MENU, client, "shell", "open", "command"))


def _app_path(exe: str) -> str:
    return "\\".join((_APP_PATHS, exe))


REGISTRY_PATHS: tuple[Browser, ...] = (
    ("Chrome", _client_command("Google Chrome")),
    ("Chrome", _app_path("chrome.exe")),
    ("Firefox", _client_command("FIREFOX.EXE")),
    ("Firefox", "\\".join(("Software", "Mozilla", "Mozilla Firefox", "CommandLineArgs"))),
    ("Firefox", _app_path("firefox.exe")),
    ("Edge", _client_command("Microsoft Edge")),
    ("Edge", _app_path("msedge.exe")),
    ("Brave", _client_command("Brave")),
    ("Brave", _app_path("brave.exe")),
    ("Opera", _client_command("Opera")),
    ("Opera", _app_path("opera.exe")),
    ("Opera GX", _client_command("Opera GX")),
    ("Vivaldi", _client_command("Vivaldi")),
    ("DuckDuckGo", _client_command("DuckDuckGo")),
    ("DuckDuckGo", _app_path("duckduckgo.exe")),
)

_INSTALL_LOCATIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Chrome", ("Google", "Chrome", "Application", "chrome.exe")),
    ("Chrome Beta", ("Google", "Chrome Beta", "Application", "chrome.exe")),
    ("Chrome Canary", ("Google", "Chrome SxS", "Application", "chrome.exe")),
    ("Firefox", ("Mozilla Firefox", "firefox.exe")),
    ("Firefox", ("Firefox", "firefox.exe")),
    ("Firefox Beta", ("Mozilla Firefox Beta", "firefox.exe")),
    ("Firefox Developer", ("Firefox Developer Edition", "firefox.exe")),
    ("Firefox Nightly", ("Firefox Nightly", "firefox.exe")),
    ("Edge", ("Microsoft", "Edge", "Application", "msedge.exe")),
    ("Edge Beta", ("Microsoft", "Edge Beta", "Application", "msedge.exe")),
    ("Edge Dev", ("Microsoft", "Edge Dev", "Application", "msedge.exe")),
    ("Edge Canary", ("Microsoft", "Edge SxS", "Application", "msedge.exe")),
    ("Brave", ("BraveSoftware", "Brave-Browser", "Application", "brave.exe")),
    ("Brave Beta", ("BraveSoftware", "Brave-Browser-Beta", "Application", "brave.exe")),
    ("Opera", ("Opera", "launcher.exe")),
    ("Opera", ("Opera", "opera.exe")),
    ("Opera GX", ("Opera Software", "Opera GX", "launcher.exe")),
    ("Opera GX", ("Opera Software", "Opera GX", "opera.exe")),
    ("Vivaldi", ("Vivaldi", "Application", "vivaldi.exe")),
    ("Tor Browser", ("Tor Browser", "Browser", "firefox.exe")),
    ("Waterfox", ("Waterfox", "waterfox.exe")),
    ("Pale Moon", ("Pale Moon", "palemoon.exe")),
    ("DuckDuckGo", ("DuckDuckGo", "DuckDuckGo.exe")),
    ("DuckDuckGo", ("DuckDuckGo", "Browser", "DuckDuckGo.exe")),
)

BROWSER_PATHS: tuple[Browser, ...] = tuple(
    (name, "\\".join(parts)) for name, parts in _INSTALL_LOCATIONS
)


def parse_command_path(command: str) -> str | None:
    """Return the first double-quoted part of a shell command, if any."""
    _, quote, rest = command.partition('"')
    if not quote:
        return None
    return rest.partition('"')[0]


def read_registry_default(root: str, subkey: str) -> str | None:
    """Read the default string value of ``root\\subkey``; None if unavailable."""
    try:
        import winreg
    except ImportError:
        return None
    try:
        with winreg.OpenKey(getattr(winreg, root), subkey) as key:
            value, _ = winreg.QueryValueEx(key, "")
    except OSError:
        return None
    return value if isinstance(value, str) else None


def _registered_path(reader: RegistryReader, reg_path: str) -> str | None:
    for root in REGISTRY_ROOTS:
        command = reader(root, reg_path)
        if command is None:
            continue
        path = parse_command_path(command)
        if path and os.path.exists(path):
            return path
    return None


def check_registry_browsers(
    registry_paths: Iterable[Browser],
    reader: RegistryReader = read_registry_default,
) -> list[Browser]:
    """Find browsers whose registered command points at an existing file."""
    found: list[Browser] = []
    for name, reg_path in registry_paths:
        path = _registered_path(reader, reg_path)
        if path is not None:
            found.append((name, path))
    return found


def _join_install_path(base: str, rel_path: str) -> str:
    joined = f"{base}/{rel_path}"
    return joined.replace("\\", "/").replace("/", os.sep)


def check_filesystem_browsers(
    browsers: Iterable[Browser],
    program_files: Sequence[str],
    browser_paths: Iterable[Browser],
) -> list[Browser]:
    """Return ``browsers`` extended with ones found in the install directories."""
    found = list(browsers)
    for name, rel_path in browser_paths:
        if any(known == name for known, _ in found):
            continue
        candidates = (_join_install_path(base, rel_path) for base in program_files)
        match = next((p for p in candidates if os.path.exists(p)), None)
        if match is not None:
            found.append((name, match))
    return found


def dedup_browsers(browsers: Iterable[Browser]) -> list[Browser]:
    """Drop entries sharing a name or path with the previous kept entry."""
    result: list[Browser] = []
    for name, path in browsers:
        if result and (result[-1][0] == name or result[-1][1] == path):
            continue
        result.append((name, path))
    return result


def get_installed_browsers(
    environ: Mapping[str, str] | None = None,
    reader: RegistryReader = read_registry_default,
) -> list[Browser]:
    """List installed browsers as (name, executable path) pairs."""
    env = os.environ if environ is None else environ
    browsers = check_registry_browsers(REGISTRY_PATHS, reader)
    program_files = [
        env.get(var, "") for var in ("ProgramFiles", "ProgramFiles(x86)", "LocalAppData")
    ]
    browsers = check_filesystem_browsers(browsers, program_files, BROWSER_PATHS)
    return dedup_browsers(browsers)