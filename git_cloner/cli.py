"""Typer-based CLI for git-cloner."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from .cloner import CloneService
from .config import WORKSPACE_ENV, resolve_context, resolve_repo_argument, resolve_workspace
from .exceptions import ClonerError, ListingError, ValidationError
from .fs import cloned_repos
from .interactive import pick_repository
from .models import RepoURL

app = typer.Typer(help="Clone repositories into a <workspace>/<host>/<org>/<repo> layout")
console = Console()
err_console = Console(stderr=True)

WORKSPACE_HELP = f"Root directory for clones. Defaults to ${WORKSPACE_ENV} or ~/projects."


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Show additional debug information."),
) -> None:
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _complete_repo(ctx: typer.Context, incomplete: str) -> list[str]:
    workspace = resolve_workspace(ctx.params.get("workspace"))
    try:
        names = CloneService(workspace).candidates()
    except ClonerError:
        return []
    return [name for name in names if name.startswith(incomplete)]


@app.command(help="Clone a repository by URL, `org/repo` or bare name")
def clone(
    ctx: typer.Context,
    repo: str | None = typer.Argument(
        None,
        help="Repository URL, or `repo` / `org/repo` when run inside <workspace>/<host>/<org>.",
        autocompletion=_complete_repo,
    ),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Print what would happen without cloning."),
    workspace: str | None = typer.Option(None, "--workspace", "-w", help=WORKSPACE_HELP),
) -> None:
    root = resolve_workspace(workspace)
    _debug(ctx, f"workspace: {root}")
    service = CloneService(root)
    try:
        url = _resolve_url(ctx, service, repo)
        plan = service.plan(url)
        returncode = service.execute(plan, _print, dry_run=dry_run)
    except ClonerError as err:
        _fail(str(err))
    if returncode != 0:
        raise typer.Exit(returncode)


@app.command(help="Print repository names for the organization of the current directory")
def complete(
    ctx: typer.Context,
    workspace: str | None = typer.Option(None, "--workspace", "-w", help=WORKSPACE_HELP),
) -> None:
    root = resolve_workspace(workspace)
    context = resolve_context(root)
    if context is None:
        _debug(ctx, f"current directory is not inside {root}/<host>/<org>")
        return
    _debug(ctx, f"inferred {context.slug}")
    try:
        names = CloneService(root).candidates()
    except ListingError as err:
        typer.secho(str(err), err=True, fg=typer.colors.YELLOW)
        return
    for name in names:
        typer.echo(name)


def _resolve_url(ctx: typer.Context, service: CloneService, repo: str | None) -> RepoURL:
    if repo:
        url = resolve_repo_argument(repo, service.workspace)
        _debug(ctx, f"resolved {repo} -> {url}")
        return url
    context = resolve_context(service.workspace)
    if context is None:
        raise ValidationError(
            "No repository given and the current directory is not inside "
            f"{service.workspace}/<host>/<org>."
        )
    selection = pick_repository(context, service.candidates(), cloned=cloned_repos(service.workspace, context))
    return resolve_repo_argument(selection, service.workspace)


def _print(line: str) -> None:
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def _debug(ctx: typer.Context, message: str) -> None:
    if ctx.obj and ctx.obj.get("verbose"):
        err_console.print(f"[dim]{escape(message)}[/dim]")


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
