from pathlib import Path

from PIL import Image

from browsea.cli import find_app_icon

SRC_ICON = Path("src/assets/app_icon/app_icon.png")
ASSETS_ICON = Path("assets/app_icon/app_icon.png")


def _write_icon(base, relative, color=(10, 20, 30, 255)):
    target = base / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", (4, 4), color).save(target)
    return target


def test_finds_icon_in_assets(tmp_path):
    expected = _write_icon(tmp_path, ASSETS_ICON)
    assert find_app_icon([tmp_path]) == expected


def test_prefers_src_assets(tmp_path):
    src = _write_icon(tmp_path, SRC_ICON)
    _write_icon(tmp_path, ASSETS_ICON)
    assert find_app_icon([tmp_path]) == src


def test_skips_unreadable_image(tmp_path):
    broken = tmp_path / SRC_ICON
    broken.parent.mkdir(parents=True)
    broken.write_bytes(b"not an image")
    expected = _write_icon(tmp_path, ASSETS_ICON)
    assert find_app_icon([tmp_path]) == expected


def test_returns_none_when_missing(tmp_path):
    assert find_app_icon([tmp_path]) is None


def test_searches_directories_in_order(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    expected = _write_icon(first, ASSETS_ICON)
    _write_icon(second, SRC_ICON)
    assert find_app_icon([first, second]) == expected


def test_falls_back_to_later_directory(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    other = tmp_path / "other"
    expected = _write_icon(other, SRC_ICON)
    assert find_app_icon([str(empty), str(other)]) == expected


def test_found_icon_is_loadable(tmp_path):
    _write_icon(tmp_path, ASSETS_ICON, color=(1, 2, 3, 255))
    found = find_app_icon([tmp_path])
    with Image.open(found) as image:
        assert image.convert("RGBA").getpixel((0, 0)) == (1, 2, 3, 255)