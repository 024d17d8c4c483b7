# wlkeymap

Set the keyboard layout and variant from the command line, the same way on
every supported Wayland desktop. `wlkeymap` works out which desktop
environment or compositor you are running and talks to it with the tool that
desktop provides.

## Supported desktops

| Desktop   | How the keymap is set                                               |
|-----------|---------------------------------------------------------------------|
| GNOME     | `gsettings` input sources (the layout is added if it is missing)    |
| KDE       | `kwriteconfig6` on `kxkbrc`                                         |
| XFCE      | `xfconf-query` on the `keyboard-layout` channel                     |
| Sway      | `swaymsg input type:keyboard ...` (the old variant is cleared first) |
| Hyprland  | an `input` block appended to `hyprland.conf`, then `hyprctl reload` |

Cinnamon and COSMIC are recognised, but setting the keymap there is reported
as an error. Every other desktop in `DesktopEnvironment` is reported as
unimplemented.

GNOME needs a layout; a variant on its own is not enough there.

For Hyprland the configuration file is `$XDG_CONFIG_HOME/hypr/hyprland.conf`,
or `~/.config/hypr/hyprland.conf` when `XDG_CONFIG_HOME` is not set. The file
must already exist.

## How the desktop is detected

`detect_desktop_environment` looks at `XDG_CURRENT_DESKTOP`,
`XDG_SESSION_DESKTOP` and `DESKTOP_SESSION` (colon-separated, case-insensitive),
and falls back to `SWAYSOCK` for Sway and `HYPRLAND_INSTANCE_SIGNATURE` for
Hyprland.

## Installation

```
pip install .
```

## Usage

Set a layout:

```
wlkeymap de
```

Set a layout and a variant:

```
wlkeymap us altgr-intl
```

Only show which desktop environment was detected:

```
wlkeymap --detect
```

`wlkeymap --help` lists the options and `wlkeymap --version` prints the
version. When the keymap has been changed, `Keymap set` is printed; otherwise
an error message is printed to standard error. The command exits with status 0
in either case.

## Using it from Python

```python
from wlkeymap.command import CommandError
from wlkeymap.keymap import (
    KeymapError,
    detect_desktop_environment,
    set_keymap,
)

desktop = detect_desktop_environment()
if desktop is not None:
    try:
        set_keymap(desktop, "de", None)
    except (KeymapError, CommandError) as error:
        print(f"Error: {error}")
```

`KeymapError` is raised when a desktop cannot have its keymap set this way;
`CommandError` is raised when an external tool cannot be started or exits
unsuccessfully.

`parse_gnome_output` turns the output of
`gsettings get org.gnome.desktop.input-sources sources` into a list of
`(layout, variant)` pairs, and `hyprland_config_block` gives the text that
would be appended to the Hyprland configuration. `wlkeymap.command` offers
`run` to start a tool and `shell_command` to render its command line.

## What it does not do

Keyboard options (XKB options) cannot be set, and the current keymap is never
read back or reported. On Hyprland the block is appended on every run; older
blocks are not removed.

## Running the tests

```
pip install ".[test]"
pytest
```