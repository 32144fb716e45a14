# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from commit_graph.cli.ui import print_error, print_success
from commit_graph.config.errors import InvalidConfigError
from commit_graph.config.graph_params import GraphParams
from commit_graph.engine.emitter import CommandEmitter
from commit_graph.engine.errors import CommandSerializationError
from commit_graph.engine.graph_generator import GraphGenerator


def _resolve_params(
    depth: int | None,
    branching_factor: int | None,
    config: Path | None,
    **options,
) -> GraphParams:
    overrides = {key: value for key, value in options.items() if value is not None}
    if config is not None:
        return GraphParams.from_file(config, depth=depth, branching_factor=branching_factor, **overrides)

    if depth is None or branching_factor is None:
        raise InvalidConfigError("🛑 DEPTH and BRANCHING_FACTOR are required unless --config is given")
    return GraphParams.from_kwargs(depth=depth, branching_factor=branching_factor, **overrides)


def generate_command(
    depth: Optional[int] = typer.Argument(
        None,
        metavar="DEPTH",
        help="Number of generations from the root commit to the tagged leaf commits, inclusive.",
        show_default=False,
    ),
    branching_factor: Optional[int] = typer.Argument(
        None,
        metavar="BRANCHING_FACTOR",
        help="Number of children spawned by every non-leaf commit.",
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML/JSON file with graph parameters. Arguments and options override its values.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the command stream to this file instead of stdout.",
    ),
    jsonl: bool = typer.Option(False, "--jsonl", help="Write one command per line (JSON Lines)."),
    compact: bool = typer.Option(False, "--compact", help="Write the JSON array on a single line."),
    path_file_name: Optional[str] = typer.Option(
        None,
        "--path-file-name",
        help="Name of the file holding each commit's ancestry path. [default: path.txt]",
    ),
    max_commits: Optional[int] = typer.Option(
        None,
        "--max-commits",
        help="Refuse parameters that would generate more commits than this. [default: 100000]",
    ),
) -> None:
    """Generate the command stream of a synthetic commit tree.

    Every commit has one parent (except the root) and a single file whose content
    is the path of commit ids leading to it. Every leaf commit is tagged.

    Examples:
        # Three generations, two children per commit, piped into a repo builder
        commit-graph generate 3 2 | generate-git-repo --bare ./tree-repo

        # Parameters from a file, written to disk as JSON Lines
        commit-graph generate --config graph.yaml --jsonl -o commands.jsonl
    """
    try:
        params = _resolve_params(
            depth,
            branching_factor,
            config,
            path_file_name=path_file_name,
            max_commits=max_commits,
        )
    except InvalidConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    log = GraphGenerator().build(params)

    emitter = CommandEmitter(indent=None if compact else 2)
    try:
        payload = emitter.serialize_lines(log) if jsonl else emitter.serialize(log)
    except CommandSerializationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(payload.decode("utf-8"), nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload)
    print_success(f"Wrote {log.num_commits} commits and {log.num_tags} tags to {output}")
