"""Parse repository URLs and split them into host, organization and name."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from .exceptions import ParseError
from .models import RepoParts, RepoURL

SUPPORTED_SCHEMES = ("http", "https", "ssh")

_SCP_RE = re.compile(r"^(?P<user>[^@/\s]+)@(?P<host>[^:/\s]+):(?P<path>(?!/)[^\s]*)$")
_SINGLE_DOT = {".", "%2e"}
_DOUBLE_DOT = {"..", ".%2e", "%2e.", "%2e%2e"}


def parse_repo_url(text: str) -> RepoURL:
    """Parse ``text`` as an absolute http, https or ssh URL.

    The scp-like ``git@host:org/repo.git`` form is also accepted and treated as
    ``ssh://git@host/org/repo.git``; ``raw`` keeps the text as typed.
    """

    candidate = text.strip()
    if not candidate:
        raise ParseError("Repository reference is empty.")
    match = _SCP_RE.match(candidate)
    if match:
        normalized = f"ssh://{match.group('user')}@{match.group('host')}/{match.group('path')}"
    else:
        normalized = candidate
    try:
        parts = urlsplit(normalized)
        host = _host(parts.netloc, parts.hostname)
    except ValueError as exc:
        raise ParseError(f"Invalid URL {text!r}: {exc}") from exc
    scheme = parts.scheme.lower()
    if not scheme:
        raise ParseError(f"Invalid URL {text!r}: relative URL without a base")
    if scheme not in SUPPORTED_SCHEMES:
        raise ParseError(
            f"Unsupported URL scheme {scheme!r} in {text!r}. Use one of: {', '.join(SUPPORTED_SCHEMES)}."
        )
    return RepoURL(
        raw=candidate,
        scheme=scheme,
        host=host,
        segments=_split_path(parts.path),
    )


def _host(netloc: str, hostname: str | None) -> str | None:
    authority = netloc.rpartition("@")[2]
    if authority.startswith("["):
        end = authority.find("]")
        if end != -1:
            return authority[: end + 1].lower()
    return hostname or None


def _split_path(path: str) -> tuple[str, ...] | None:
    if not path:
        return ()
    if not path.startswith("/"):
        # opaque, e.g. "https:foo"
        return None
    return _remove_dot_segments(path[1:].split("/"))


def _remove_dot_segments(raw: list[str]) -> tuple[str, ...]:
    """Resolve ``.`` and ``..`` (and their ``%2e`` spellings) without leaving the root."""

    segments: list[str] = []
    last = len(raw) - 1
    for index, segment in enumerate(raw):
        lowered = segment.lower()
        if lowered in _DOUBLE_DOT:
            if segments:
                segments.pop()
        elif lowered not in _SINGLE_DOT:
            segments.append(segment)
            continue
        # a trailing dot segment leaves the path ending in "/"
        if index == last:
            segments.append("")
    return tuple(segments)


def decompose(url: RepoURL | str) -> RepoParts:
    """Return the host, organization path and repository name of ``url``."""

    if isinstance(url, str):
        url = parse_repo_url(url)
    return RepoParts(host=url.host, organization=url.organization, name=url.name)
