# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import json
from pathlib import Path
from typing import Optional

from rich.table import Table
import typer

from commit_graph.cli.ui import output_console, print_error
from commit_graph.cli.utils import read_commands
from commit_graph.config.commands import CommandT
from commit_graph.config.errors import InvalidConfigError
from commit_graph.engine.analysis import CommitGraphIndex


def load_index(input_path: Path | None) -> CommitGraphIndex:
    """Read a command stream and index it, exiting with code 1 when it can't be read."""
    try:
        commands: list[CommandT] = read_commands(input_path)
    except InvalidConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    return CommitGraphIndex.from_commands(commands)


def inspect_command(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Read the command stream from this file instead of stdin.",
    ),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Summarize the commit graph described by a command stream."""
    index = load_index(input_path)
    summary = index.summary()

    if output_json:
        typer.echo(json.dumps(summary.to_dict(), indent=2))
        return

    table = Table(title="Commit Graph", show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for metric, value in summary.to_dict().items():
        table.add_row(metric.replace("_", " "), str(value))
    output_console.print(table)


def can_fastforward_command(
    commit_ids: list[str] = typer.Argument(..., help="Commit ids to reconcile."),
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Read the command stream from this file instead of stdin.",
    ),
) -> None:
    """Print the commit all given commits can be fast-forwarded to.

    Exits with code 1 when two of the commits are on diverging lines of history.
    """
    index = load_index(input_path)

    unknown = [commit_id for commit_id in commit_ids if commit_id not in index]
    if unknown:
        print_error(f"Unknown commit id(s): {', '.join(unknown)}")
        raise typer.Exit(code=1)

    target = index.can_fastforward(commit_ids)
    if target is None:
        print_error(f"Commits {', '.join(commit_ids)} have diverged and cannot be fast-forwarded")
        raise typer.Exit(code=1)
    typer.echo(target)
