"""Repository picker built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Iterable

from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from .exceptions import ValidationError
from .models import InferredContext


def pick_repository(context: InferredContext, names: Iterable[str], cloned: Iterable[str] = ()) -> str:
    """Let the user fuzzy-pick one of ``names`` from the ``context`` organization."""

    choices = build_choices(names, cloned=cloned)
    if not choices:
        raise ValidationError(f"No repositories found for {context.slug}.")
    if not sys.stdin.isatty():
        raise ValidationError(
            f"Picking a repository from {context.slug} needs a terminal. "
            "Run `cloner clone <repo>` or `cloner complete` instead."
        )
    return str(inquirer.fuzzy(message=f"Clone from {context.slug}", choices=choices).execute())


def build_choices(names: Iterable[str], *, cloned: Iterable[str] = ()) -> list[Choice]:
    """Not-yet-cloned repositories first, already cloned ones labelled and last."""

    present = set(cloned)
    fresh: list[Choice] = []
    existing: list[Choice] = []
    seen: set[str] = set()
    for name in names:
        if not name or name in seen:
            continue
        seen.add(name)
        if name in present:
            existing.append(Choice(value=name, name=f"{name} (already cloned)"))
        else:
            fresh.append(Choice(value=name, name=name))
    return fresh + existing
