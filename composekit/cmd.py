"""Run external commands and fail loudly when they do not succeed."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from os import PathLike

log = logging.getLogger(__name__)

_Arg = "str | PathLike[str]"


class CommandError(RuntimeError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, desc: str, returncode: int) -> None:
        super().__init__(f"{desc} failed: exit status {returncode}")
        self.desc = desc
        self.returncode = returncode


def _start(args: Sequence[str | PathLike[str]], desc: object) -> tuple[list[str], str]:
    command = [str(arg) for arg in args]
    description = str(desc)
    log.info("Starting to %s, command: %s", description, command)
    return command, description


def run_command(
    args: Sequence[str | PathLike[str]],
    desc: object,
    cwd: str | PathLike[str] | None = None,
) -> None:
    """Run a command, inheriting stdio, and raise CommandError if it fails."""
    command, description = _start(args, desc)
    completed = subprocess.run(command, cwd=cwd, check=False)
    if completed.returncode != 0:
        raise CommandError(description, completed.returncode)
    log.info("%s succeed!", description)


def get_cmd_output(
    args: Sequence[str | PathLike[str]],
    desc: object,
    cwd: str | PathLike[str] | None = None,
) -> str:
    """Run a command and return its standard output decoded as UTF-8."""
    command, description = _start(args, desc)
    completed = subprocess.run(command, cwd=cwd, check=False, stdout=subprocess.PIPE)
    if completed.returncode != 0:
        raise CommandError(description, completed.returncode)
    log.info("%s succeed!", description)
    return completed.stdout.decode("utf-8")