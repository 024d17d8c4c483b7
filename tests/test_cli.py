import subprocess

import pytest

from wlkeymap.cli import build_parser, main

_DETECTION_KEYS = (
    "XDG_CURRENT_DESKTOP",
    "XDG_SESSION_DESKTOP",
    "DESKTOP_SESSION",
    "SWAYSOCK",
    "HYPRLAND_INSTANCE_SIGNATURE",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in _DETECTION_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_parser_reads_positionals():
    args = build_parser().parse_args(["de", "us"])
    assert (args.layout, args.variant, args.detect) == ("de", "us", False)


def test_parser_detect_flag():
    args = build_parser().parse_args(["-d"])
    assert args.detect is True
    assert args.layout is None


def test_detection_failure(clean_env, capsys):
    assert main([]) == 0
    assert capsys.readouterr().err == "Failed to detect desktop environment\n"


def test_detect_prints_desktop(clean_env, capsys):
    clean_env.setenv("XDG_CURRENT_DESKTOP", "GNOME")
    main(["--detect"])
    assert capsys.readouterr().out == "Detected desktop environment: Gnome\n"


def test_requires_layout_or_variant(clean_env, capsys):
    clean_env.setenv("XDG_CURRENT_DESKTOP", "sway")
    main([])
    assert capsys.readouterr().err == (
        "Error: Please provide a layout or variant, or use --detect (See --help).\n"
    )


def test_sets_keymap(clean_env, capsys):
    clean_env.setenv("XDG_CURRENT_DESKTOP", "sway")
    recorded = []

    def fake_run(args, **kwargs):
        recorded.append(list(args))
        return subprocess.CompletedProcess(args, 0)

    clean_env.setattr(subprocess, "run", fake_run)
    main(["de"])
    assert capsys.readouterr().out == "Keymap set\n"
    assert recorded[-1][-1] == "de"


def test_reports_keymap_error(clean_env, capsys):
    clean_env.setenv("XDG_CURRENT_DESKTOP", "X-Cinnamon")
    main(["de"])
    captured = capsys.readouterr()
    assert captured.err.startswith("Error: As of June 2025")
    assert captured.out == ""