import os

from browsea.browsers import (
    check_filesystem_browsers,
    check_registry_browsers,
    dedup_browsers,
    get_installed_browsers,
    parse_command_path,
    read_registry_default,
)


def _make_exe(base, rel):
    path = base.joinpath(*rel.split("\\"))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def test_parse_command_path_quoted():
    assert parse_command_path('"C:\\b\\chrome.exe" -- "%1"') == "C:\\b\\chrome.exe"


def test_parse_command_path_unquoted():
    assert parse_command_path("C:\\b\\chrome.exe") is None


def test_parse_command_path_trailing_quote():
    assert parse_command_path('abc"') == ""


def test_read_registry_default_missing_key():
    assert read_registry_default("HKEY_CURRENT_USER", r"Software\NoSuchVendor\NoSuchKey") is None


def test_registry_browsers_existing_file(tmp_path):
    exe = tmp_path / "chrome.exe"
    exe.write_bytes(b"")
    calls = []

    def reader(root, subkey):
        calls.append(root)
        return f'"{exe}" --flag'

    found = check_registry_browsers([("Chrome", "key")], reader)
    assert found == [("Chrome", str(exe))]
    assert calls == ["HKEY_LOCAL_MACHINE"]


def test_registry_browsers_falls_through_roots(tmp_path):
    exe = tmp_path / "edge.exe"
    exe.write_bytes(b"")

    def reader(root, subkey):
        return None if root == "HKEY_LOCAL_MACHINE" else f'"{exe}"'

    assert check_registry_browsers([("Edge", "key")], reader) == [("Edge", str(exe))]


def test_registry_browsers_missing_file(tmp_path):
    missing = tmp_path / "gone.exe"
    found = check_registry_browsers([("Brave", "key")], lambda r, s: f'"{missing}"')
    assert found == []


def test_filesystem_finds_first_base(tmp_path):
    first = tmp_path / "pf"
    second = tmp_path / "pf86"
    _make_exe(second, r"Vivaldi\Application\vivaldi.exe")
    found = check_filesystem_browsers(
        [], [str(first), str(second)], [("Vivaldi", r"Vivaldi\Application\vivaldi.exe")]
    )
    assert len(found) == 1
    name, path = found[0]
    assert name == "Vivaldi"
    assert os.path.samefile(path, second / "Vivaldi" / "Application" / "vivaldi.exe")


def test_filesystem_skips_known_names(tmp_path):
    _make_exe(tmp_path, r"Opera\opera.exe")
    _make_exe(tmp_path, r"Opera\launcher.exe")
    known = [("Opera", "elsewhere")]
    found = check_filesystem_browsers(
        known, [str(tmp_path)], [("Opera", r"Opera\launcher.exe"), ("Opera", r"Opera\opera.exe")]
    )
    assert found == known


def test_filesystem_does_not_mutate_input(tmp_path):
    _make_exe(tmp_path, r"Waterfox\waterfox.exe")
    original = []
    found = check_filesystem_browsers(original, [str(tmp_path)], [("Waterfox", r"Waterfox\waterfox.exe")])
    assert original == []
    assert [name for name, _ in found] == ["Waterfox"]


def test_dedup_consecutive_name_or_path():
    browsers = [("A", "p1"), ("A", "p2"), ("B", "p2"), ("C", "p3"), ("A", "p4")]
    assert dedup_browsers(browsers) == [("A", "p1"), ("B", "p2"), ("C", "p3"), ("A", "p4")]


def test_dedup_is_idempotent():
    browsers = [("A", "x"), ("B", "x"), ("B", "y"), ("C", "z")]
    once = dedup_browsers(browsers)
    assert dedup_browsers(once) == once


def test_get_installed_browsers_from_filesystem(tmp_path):
    exe = _make_exe(tmp_path, r"Google\Chrome\Application\chrome.exe")
    found = get_installed_browsers({"ProgramFiles": str(tmp_path)}, lambda r, s: None)
    assert [name for name, _ in found] == ["Chrome"]
    assert os.path.samefile(found[0][1], exe)


def test_get_installed_browsers_prefers_registry(tmp_path):
    reg_exe = tmp_path / "reg" / "chrome.exe"
    reg_exe.parent.mkdir()
    reg_exe.write_bytes(b"")
    _make_exe(tmp_path / "pf", r"Google\Chrome\Application\chrome.exe")

    def reader(root, subkey):
        return f'"{reg_exe}"' if "chrome" in subkey.lower() else None

    found = get_installed_browsers({"ProgramFiles": str(tmp_path / "pf")}, reader)
    assert found == [("Chrome", str(reg_exe))]