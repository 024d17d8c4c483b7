"""Running external tools with readable error messages."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence


class CommandError(Exception):
    """An external tool could not be started or reported failure."""


def shell_command(args: Sequence[str]) -> str:
    """Render a command line the way a user would type it into a shell."""
    program, *rest = args
    quoted = [f'"{arg}"' if " " in arg else arg for arg in rest]
    return " ".join([program, *quoted])


def run(args: Sequence[str]) -> None:
    """Run a tool, discarding its output but passing its errors through.

    Raises CommandError when the tool cannot be started or exits unsuccessfully.
    """
    args = list(args)
    try:
        completed = subprocess.run(args, stdout=subprocess.DEVNULL, check=False)
    except OSError as exc:
        raise CommandError(f"Failed to execute `{shell_command(args)}`:\n {exc}") from exc
    if completed.returncode != 0:
        # A tool killed by a signal has no exit code of its own.
        code = completed.returncode if completed.returncode > 0 else -1
        raise CommandError(f"{args[0]} returned exit code {code}")