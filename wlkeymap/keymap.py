"""Setting the keyboard layout on the running desktop environment."""

from __future__ import annotations

import enum
import os
import re
import subprocess
from collections.abc import Mapping
from pathlib import Path

from wlkeymap.command import run


class KeymapError(Exception):
    """The keymap could not be changed."""


class DesktopEnvironment(enum.Enum):
    """Desktop environments and compositors that can be told apart."""

    CINNAMON = "Cinnamon"
    COSMIC = "Cosmic"
    COSMIC_EPOCH = "CosmicEpoch"
    DDE = "Dde"
    EDE = "Ede"
    ENDLESS = "Endless"
    ENLIGHTENMENT = "Enlightenment"
    GNOME = "Gnome"
    HYPRLAND = "Hyprland"
    KDE = "Kde"
    LXDE = "Lxde"
    LXQT = "Lxqt"
    MAC_OS = "MacOs"
    MATE = "Mate"
    OLD = "Old"
    PANTHEON = "Pantheon"
    RAZOR = "Razor"
    ROX = "Rox"
    SWAY = "Sway"
    TDE = "Tde"
    UNITY = "Unity"
    WINDOWS = "Windows"
    XFCE = "Xfce"


_DESKTOP_NAMES = {
    "cinnamon": DesktopEnvironment.CINNAMON,
    "x-cinnamon": DesktopEnvironment.CINNAMON,
    "cosmic": DesktopEnvironment.COSMIC_EPOCH,
    "deepin": DesktopEnvironment.DDE,
    "dde": DesktopEnvironment.DDE,
    "ede": DesktopEnvironment.EDE,
    "endless": DesktopEnvironment.ENDLESS,
    "enlightenment": DesktopEnvironment.ENLIGHTENMENT,
    "gnome": DesktopEnvironment.GNOME,
    "hyprland": DesktopEnvironment.HYPRLAND,
    "kde": DesktopEnvironment.KDE,
    "plasma": DesktopEnvironment.KDE,
    "lxde": DesktopEnvironment.LXDE,
    "lxqt": DesktopEnvironment.LXQT,
    "mate": DesktopEnvironment.MATE,
    "pantheon": DesktopEnvironment.PANTHEON,
    "razor": DesktopEnvironment.RAZOR,
    "rox": DesktopEnvironment.ROX,
    "sway": DesktopEnvironment.SWAY,
    "tde": DesktopEnvironment.TDE,
    "trinity": DesktopEnvironment.TDE,
    "unity": DesktopEnvironment.UNITY,
    "xfce": DesktopEnvironment.XFCE,
}

_GNOME_SOURCE = re.compile(r"\('xkb', '(\w*)(\+\w*)?'\)")


def detect_desktop_environment(
    environ: Mapping[str, str] | None = None,
) -> DesktopEnvironment | None:
    """Guess the running desktop environment from environment variables."""
    env = os.environ if environ is None else environ
    for key in ("XDG_CURRENT_DESKTOP", "XDG_SESSION_DESKTOP", "DESKTOP_SESSION"):
        for name in env.get(key, "").split(":"):
            found = _DESKTOP_NAMES.get(name.strip().lower())
            if found is not None:
                return found
    if env.get("SWAYSOCK"):
        return DesktopEnvironment.SWAY
    if env.get("HYPRLAND_INSTANCE_SIGNATURE"):
        return DesktopEnvironment.HYPRLAND
    return None


def parse_gnome_output(formats: str) -> list[tuple[str, str | None]]:
    """Extract (layout, variant) pairs from a gsettings input-sources listing."""
    return [
        (match.group(1), match.group(2)[1:] if match.group(2) is not None else None)
        for match in _GNOME_SOURCE.finditer(formats)
    ]


def hyprland_config_block(layout: str | None, variant: str | None) -> str:
    """Return the block appended to the Hyprland config, or "" if nothing is set."""
    lines = []
    if layout is not None:
        lines.append(f"input:kb_layout = {layout}\n")
    if variant is not None:
        lines.append(f"input:kb_variant = {variant}\n")
    if not lines:
        return ""
    return (
        "\n# --- Begin setwlkeymap generated ---\n"
        + "".join(lines)
        + "# --- End setwlkeymap generated ---\n"
    )


def _set_kde(layout: str | None, variant: str | None) -> None:
    # kwriteconfig6 edits kxkbrc and notifies the session over dbus.
    for key, value in (("LayoutList", layout), ("VariantList", variant)):
        if value is not None:
            run(["kwriteconfig6", "--file", "kxkbrc", "--group", "Layout",
                 "--key", key, value])


def _set_xfce(layout: str | None, variant: str | None) -> None:
    def set_property(prop: str, value: str) -> None:
        run(["xfconf-query", "-c", "keyboard-layout", "-p", prop, "-s", value])

    set_property("/Default/XkbDisable", "false")
    if layout is not None:
        set_property("/Default/XkbLayout", layout)
    if variant is not None:
        set_property("/Default/XkbVariant", variant)


def _set_gnome(layout: str | None, variant: str | None) -> None:
    if layout is None:
        raise KeymapError("Setting the gnome keymap requires a layout")
    try:
        result = subprocess.run(
            ["gsettings", "get", "org.gnome.desktop.input-sources", "sources"],
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise KeymapError(f"Error: Failed to execute gsettings: {exc!r}") from exc
    formats = result.stdout.decode("utf-8")
    sources = parse_gnome_output(formats)

    try:
        index = sources.index((layout, variant))
    except ValueError:
        suffix = f"+{variant}" if variant is not None else ""
        entry = f"('xkb', '{layout}{suffix}')"
        updated = f"[{entry}]" if not formats else formats.replace("]", f", {entry}]")
        run(["gsettings", "set", "org.gnome.desktop.input-sources", "sources", updated])
        index = len(sources)

    run(["gsettings", "set", "org.gnome.desktop.input-sources", "current", str(index)])


def _set_cinnamon(layout: str | None, variant: str | None) -> None:
    raise KeymapError(
        "As of June 2025 cinnamon wayland is still experimental and doesn't yet support"
        " switching\n the keyboard layout. You can check if that's still the case by"
        " opening the keyboard settings dialog\n and looking for an 'Layout' tab. In case"
        " this changed consider opening an issue or submitting a\n patch."
    )


def _set_sway(layout: str | None, variant: str | None) -> None:
    # swaymsg validates after every command, so the old variant is cleared first.
    base = ["swaymsg", "input", "type:keyboard"]
    run([*base, "xkb_variant", "''"])
    if layout is not None:
        run([*base, "xkb_layout", layout])
    if variant is not None:
        run([*base, "xkb_variant", variant])


def _set_hyprland(layout: str | None, variant: str | None) -> None:
    block = hyprland_config_block(layout, variant)
    if not block:
        return
    config_dir = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
    config_file = config_dir / "hypr" / "hyprland.conf"
    try:
        fd = os.open(config_file, os.O_WRONLY | os.O_APPEND)
    except OSError as exc:
        raise KeymapError(f"Error: Failed to open config file at: {config_file}") from exc
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(block)
    except OSError as exc:
        raise KeymapError(f"Error: Failed to write config file: {exc}") from exc
    run(["hyprctl", "reload"])


def _set_cosmic_epoch(layout: str | None, variant: str | None) -> None:
    raise KeymapError("COSMIC epoch support was disabled during build.")


_SETTERS = {
    DesktopEnvironment.CINNAMON: _set_cinnamon,
    DesktopEnvironment.COSMIC_EPOCH: _set_cosmic_epoch,
    DesktopEnvironment.GNOME: _set_gnome,
    DesktopEnvironment.HYPRLAND: _set_hyprland,
    DesktopEnvironment.KDE: _set_kde,
    DesktopEnvironment.SWAY: _set_sway,
    DesktopEnvironment.XFCE: _set_xfce,
}


def set_keymap(
    desktop: DesktopEnvironment,
    layout: str | None = None,
    variant: str | None = None,
) -> None:
    """Set the keyboard layout and/or variant on the given desktop environment."""
    setter = _SETTERS.get(desktop)
    if setter is None:
        raise KeymapError(f"settings keymap unimplemented for {desktop.value}")
    setter(layout, variant)