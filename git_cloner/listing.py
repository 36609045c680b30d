"""Repository listing adapter - shells out to the GitHub `gh` command."""

from __future__ import annotations

import json
import subprocess

from .exceptions import ListingError, UnsupportedHostError

GITHUB_HOST = "github.com"
PAGE_SIZE = 50


def list_command(org: str, limit: int = PAGE_SIZE) -> list[str]:
    return ["gh", "repo", "list", org, "--limit", str(limit), "--json", "name"]


def list_organization_repos(org: str, host: str = GITHUB_HOST) -> list[str]:
    """Return up to ``PAGE_SIZE`` repository names owned by ``org``.

    Raises:
        UnsupportedHostError: If ``host`` is not GitHub
        ListingError: If ``gh`` fails or prints something other than a JSON array
    """
    if host != GITHUB_HOST:
        raise UnsupportedHostError(f"Listing repositories is only supported on {GITHUB_HOST}, not {host}")

    cmd = list_command(org)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        error_msg = f"gh command failed with exit code {e.returncode}"
        if e.stderr:
            error_msg += f"\nError: {e.stderr.strip()}"
        raise ListingError(error_msg) from e
    except FileNotFoundError:
        raise ListingError("gh command not found. Install it from https://cli.github.com/") from None

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise ListingError(f"Invalid JSON from gh: {e}\nOutput: {result.stdout}") from e

    if not isinstance(data, list):
        raise ListingError(f"Expected a JSON array from gh, got {type(data).__name__}")

    names = []
    for item in data:
        if isinstance(item, dict) and isinstance(item.get("name"), str):
            names.append(item["name"])
    return names
