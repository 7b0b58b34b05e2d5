from __future__ import annotations

import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape as rich_escape

from .exceptions import CommitmentError, NoChangesError
from .git import ensure_repository, get_current_branch, has_changes
from .message import compose_message
from .transaction import commit_all

console = Console()


def _fail(error: Exception) -> NoReturn:
    console.print(f"[bold red]{rich_escape(str(error))}[/]")
    sys.exit(1)


@click.command()
@click.argument("message", nargs=-1)
@click.option("--dry-run", "-n", is_flag=True, help="Print the commit message without staging or committing.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(message: tuple[str, ...], dry_run: bool, verbose: bool) -> None:
    """Stage all changes and commit them as 'TICKET-123 Message'.

    The ticket is taken from the current branch name (e.g. ABC-123-my-feature)
    unless MESSAGE starts with one itself.
    """
    if verbose:
        import logging
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG] %(message)s")
        logging.getLogger("commitment").setLevel(logging.DEBUG)

    raw_message = " ".join(message)

    try:
        ensure_repository()
        if not has_changes():
            raise NoChangesError("No uncommitted changes found")
        branch = get_current_branch()
        commit_msg = compose_message(branch, raw_message)
    except CommitmentError as e:
        _fail(e)

    if dry_run:
        console.print(f"[dim](dry run)[/] {rich_escape(commit_msg)}")
        return

    try:
        result = commit_all(commit_msg)
    except CommitmentError as e:
        _fail(e)

    root = " (root-commit)" if result.is_root else ""
    label = rich_escape(f"[{branch}{root} {result.short_sha}]")
    console.print(f"[green]{label}[/] {rich_escape(commit_msg)}")
