# browsea

browsea puts a small window between a clicked link and your web browsers. It
registers itself as a browser for the current Windows user. When a link is
opened through it, a window lists the browsers installed on the machine. You
choose which one opens the link.

## Installation

```
pip install .
```

The picker window uses Tkinter, which ships with most Python installations.
Images are handled with Pillow.

## Usage

Register browsea as a browser handler for the current user:

```
browsea
```

With no arguments, browsea writes its entries under `HKEY_CURRENT_USER`:

- `Software\Classes\Browsea`, with its capabilities and `http`/`https` URL associations;
- `Software\Clients\StartMenuInternet\Browsea`;
- a `Browsea` value under `Software\RegisteredApplications`.

The registered command is the path of the running program followed by `"%1"`.
After that you can select browsea as the default browser in the Windows
settings. If the registry cannot be written, the command logs the error and
exits with status 1.

Open a link through the picker:

```
browsea https://www.example.com
```

A window of 200×300 pixels opens centred and on top of other windows. It lists
the browsers that were found. Click one and it is started with the link as its
only argument, and the picker closes. If the browser cannot be started, the
error is logged and the picker still closes.

## Finding browsers

Browsers are found in two ways:

- through the Windows registry, by the `StartMenuInternet` and `App Paths` keys
  of the usual browsers: Chrome, Firefox, Edge, Brave, Opera, Opera GX,
  Vivaldi and DuckDuckGo. Both `HKEY_LOCAL_MACHINE` and `HKEY_CURRENT_USER`
  are checked. The executable is the first double-quoted part of the
  registered command;
- through well-known install folders under `ProgramFiles`, `ProgramFiles(x86)`
  and `LocalAppData`. These also find beta, developer, nightly and canary
  builds, Tor Browser, Waterfox and Pale Moon. A name that was already found
  in the registry is not looked up again.

Only executables that exist on disk are listed. When several entries in a row
share a name or a path, only the first is kept. The custom browsers from the
settings are added after the ones that were found.

## Settings

The gear button opens the settings page. There you can:

- show or hide each browser in the picker;
- remove a browser from the list. This also clears its hidden flag;
- add a custom browser by choosing its `.exe`. It is named after the file name
  without its extension;
- switch between the light and dark themes.

Settings are saved as JSON in `%LOCALAPPDATA%\Browsea\config.json`. When
`LOCALAPPDATA` is not set, they go to `./Browsea/config.json`. The file holds
the custom browsers as `[name, path]` pairs and the names of hidden browsers.
A missing or malformed file is treated as empty settings.

## Icons

Icons for Chrome, Firefox, Edge, Opera, Safari, Brave and Internet Explorer
are looked up as `src/assets/browser_icons/<name>.png`. The sun and moon
buttons are looked up as `src/assets/theme_icons/<name>.png`, and the window
icon as `src/assets/app_icon/app_icon.png` or `assets/app_icon/app_icon.png`.
Each is searched in the working directory and next to the running program.
When an icon is missing, a square is drawn in a colour derived from the name.

## Using it as a library

```python
from browsea.config import Config
from browsea.picker import Picker

picker = Picker.from_system("https://www.example.com", Config.load())
for entry in picker.visible_browsers():
    print(entry.name, entry.path)
```

Other useful entry points:

- `browsea.browsers.get_installed_browsers()`;
- `browsea.launcher.launch_browser(path, url)`, which raises `LaunchError`
  when the process cannot be started;
- `browsea.registry.registration_entries(exe_path)`, which lists the registry
  values that registration writes without writing them;
- `browsea.picker.grid_layout(width, height, count)`, which computes the
  picker's grid.

## What it does not do

- The image files for icons are not included in the package. Unless they are
  placed as described above, every browser is shown with a coloured square.
- The light or dark choice is not saved. Each window starts in the light theme.
- Registration does not make browsea the default browser. That choice is left
  to the Windows settings.
- Browser discovery through the registry works only on Windows. Elsewhere only
  the install folders and custom browsers are used.