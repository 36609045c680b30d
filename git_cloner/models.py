"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .exceptions import ParseError

BITBUCKET_PREFIX = "scm"


@dataclass(frozen=True)
class RepoURL:
    """A parsed repository URL.

    ``host`` is ``None`` when the URL carries no host at all. ``segments`` is
    ``None`` for opaque URLs that have no hierarchical path, and an empty
    tuple when the path is simply empty.
    """

    raw: str
    scheme: str
    host: str | None
    segments: tuple[str, ...] | None

    def __str__(self) -> str:
        return self.raw

    @property
    def has_host(self) -> bool:
        return bool(self.host)

    def path_segments(self) -> tuple[str, ...]:
        if self.segments is None:
            raise ParseError(f"URL has no path segments: {self.raw}")
        return self.segments

    @property
    def organization(self) -> tuple[str, ...]:
        segments = self.path_segments()
        if len(segments) >= 3 and segments[0] == BITBUCKET_PREFIX:
            return segments[1:-1]
        return segments[:-1]

    @property
    def name(self) -> str:
        segments = self.path_segments()
        if not segments:
            return ""
        last = segments[-1]
        if last.endswith(".git"):
            last = last[: -len(".git")]
        return last


@dataclass(frozen=True)
class RepoParts:
    """Host, organization path and repository name of a URL."""

    host: str | None
    organization: tuple[str, ...]
    name: str


@dataclass(frozen=True)
class InferredContext:
    """Host and organization derived from the current directory."""

    host: str
    organization: str

    @property
    def slug(self) -> str:
        return f"{self.host}/{self.organization}"


@dataclass(frozen=True)
class ClonePlan:
    """Concrete locations and command for a single clone."""

    url: RepoURL
    folder: Path
    target: Path
    command: tuple[str, ...]
