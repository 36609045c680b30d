"""Filesystem helpers for git-cloner."""

from __future__ import annotations

from pathlib import Path

from .exceptions import WorkspaceError
from .models import InferredContext, RepoURL


def expand_home(path: str | Path) -> Path:
    """Expand a leading ``~``; leave the path alone if no home directory is known."""

    candidate = Path(path)
    try:
        return candidate.expanduser()
    except RuntimeError:
        return candidate


def build_destination(workspace: str | Path, url: RepoURL) -> Path:
    """Directory that ``git clone`` runs in: ``<workspace>/<host>/<org...>``."""

    folder = expand_home(workspace)
    if url.host:
        folder = folder / url.host
    for segment in url.organization:
        if segment:
            folder = folder / segment
    return folder


def clone_target(workspace: str | Path, url: RepoURL) -> Path:
    folder = build_destination(workspace, url)
    return folder / url.name if url.name else folder


def infer_context(workspace: str | Path, cwd: str | Path) -> InferredContext | None:
    """Derive host and organization from where ``cwd`` sits under ``workspace``.

    Only the first two components below the workspace are used, so nested
    organizations are not reconstructed.
    """

    root = expand_home(workspace)
    current = expand_home(cwd)
    try:
        relative = current.relative_to(root)
    except ValueError:
        return None
    parts = relative.parts
    if len(parts) < 2:
        return None
    return InferredContext(host=parts[0], organization=parts[1])


def ensure_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WorkspaceError(f"Failed to create directory {path}: {exc}") from exc


def cloned_repos(workspace: str | Path, context: InferredContext) -> set[str]:
    """Names of directories already present under ``<workspace>/<host>/<org>``."""

    folder = expand_home(workspace) / context.host / context.organization
    if not folder.is_dir():
        return set()
    return {child.name for child in folder.iterdir() if child.is_dir()}
