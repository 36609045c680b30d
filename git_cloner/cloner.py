"""High-level orchestration for clone and completion operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from . import git
from .config import resolve_context
from .fs import build_destination, clone_target, ensure_directory
from .listing import list_organization_repos
from .models import ClonePlan, RepoURL

MARKER = "»"


@dataclass
class CloneService:
    workspace: Path

    def plan(self, url: RepoURL) -> ClonePlan:
        return ClonePlan(
            url=url,
            folder=build_destination(self.workspace, url),
            target=clone_target(self.workspace, url),
            command=tuple(git.clone_command(url)),
        )

    def execute(self, plan: ClonePlan, echo: Callable[[str], None], *, dry_run: bool = False) -> int:
        echo(f"{MARKER} Cloning {plan.url} → {plan.target}")
        if dry_run:
            echo(f"{MARKER} mkdir -p {plan.folder}")
            echo(f"{MARKER} {' '.join(plan.command)}")
            return 0
        ensure_directory(plan.folder)
        returncode = git.stream_clone(plan.url, plan.folder, echo)
        if returncode == 0:
            echo(f"{MARKER} Cloned to {plan.target}")
        return returncode

    def candidates(self, cwd: Path | None = None) -> list[str]:
        """Repository names for the organization inferred from ``cwd``."""

        context = resolve_context(self.workspace, cwd)
        if context is None:
            return []
        return list_organization_repos(context.organization, host=context.host)
