"""Resolve the workspace and turn user input into repository URLs."""

from __future__ import annotations

import os
from pathlib import Path

from .exceptions import ParseError
from .fs import expand_home, infer_context
from .models import InferredContext, RepoURL
from .urls import parse_repo_url

WORKSPACE_ENV = "CLONER_WORKSPACE"
DEFAULT_WORKSPACE = "~/projects"
DEFAULT_SCHEME = "https"


def resolve_workspace(flag: str | Path | None = None) -> Path:
    """Pick the workspace from the flag, then the environment, then the default."""

    raw = str(flag) if flag else os.environ.get(WORKSPACE_ENV) or DEFAULT_WORKSPACE
    return expand_home(raw)


def resolve_context(workspace: Path, cwd: Path | None = None) -> InferredContext | None:
    return infer_context(workspace, cwd if cwd is not None else Path.cwd())


def resolve_repo_argument(raw: str, workspace: Path, cwd: Path | None = None) -> RepoURL:
    """Expand ``raw`` into a full repository URL.

    Full URLs are returned as parsed. Inside ``<workspace>/<host>/<org>``, a bare
    ``repo`` becomes ``https://<host>/<org>/repo`` and ``org/repo`` becomes
    ``https://<host>/org/repo``. Anything else raises the original parse error.
    """

    try:
        return parse_repo_url(raw)
    except ParseError as exc:
        parse_error = exc

    context = resolve_context(workspace, cwd)
    if context is not None:
        text = raw.strip()
        parts = text.split("/")
        if len(parts) == 1 and text:
            return parse_repo_url(f"{DEFAULT_SCHEME}://{context.host}/{context.organization}/{text}")
        if len(parts) == 2 and all(parts):
            return parse_repo_url(f"{DEFAULT_SCHEME}://{context.host}/{text}")

    raise parse_error
