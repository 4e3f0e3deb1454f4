import sys

import pytest

from browsea.launcher import LaunchError, launch_browser


def test_launch_passes_url_as_argument(tmp_path):
    out = tmp_path / "out.txt"
    script = tmp_path / "fake_browser.py"
    script.write_text(
        "import sys, pathlib\n"
        f"pathlib.Path({str(out)!r}).write_text(sys.argv[0])\n",
        encoding="utf-8",
    )
    process = launch_browser(sys.executable, str(script))
    assert process.wait(timeout=30) == 0
    assert out.read_text() == str(script)


def test_launch_missing_executable_raises(tmp_path):
    missing = str(tmp_path / "no-such-browser")
    with pytest.raises(LaunchError) as info:
        launch_browser(missing, "https://example.com")
    assert missing in str(info.value)
    assert str(info.value).startswith("Failed to launch browser: ")