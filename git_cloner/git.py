"""Thin wrappers around the git CLI."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

from .exceptions import GitCommandError
from .models import RepoURL


def clone_command(url: RepoURL) -> list[str]:
    return ["git", "clone", "--progress", url.raw]


def stream_clone(url: RepoURL, folder: Path, echo: Callable[[str], None]) -> int:
    """Run ``git clone`` inside ``folder`` and echo its stdout line by line.

    stderr is inherited so git can draw its own progress. Returns the exit
    code of git, or 1 when it was killed by a signal.
    """

    cmd = clone_command(url)
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=str(folder),
            stdout=subprocess.PIPE,
            text=True,
        )
    except OSError as exc:
        raise GitCommandError(cmd, detail=str(exc)) from exc

    with proc:
        if proc.stdout is None:
            raise GitCommandError(cmd, detail="stdout was not captured")
        try:
            for line in proc.stdout:
                echo(line.rstrip("\n"))
        except (OSError, UnicodeDecodeError) as exc:
            proc.kill()
            raise GitCommandError(cmd, detail=f"failed reading output: {exc}") from exc
        returncode = proc.wait()
    if returncode < 0:
        return 1
    return returncode
