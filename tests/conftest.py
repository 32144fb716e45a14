# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
from pathlib import Path

import pytest

from commit_graph.config.commands import BranchCommand, CommandT, CommitCommand, TagCommand
from commit_graph.engine.graph_generator import CommandLog, GraphGenerator


@pytest.fixture
def generator() -> GraphGenerator:
    return GraphGenerator()


@pytest.fixture
def binary_tree_log(generator: GraphGenerator) -> CommandLog:
    """Command log for depth=3, branching_factor=2."""
    return generator.generate(depth=3, branching_factor=2)


@pytest.fixture
def merge_commands() -> list[CommandT]:
    """A hand-written stream with a merge.

    1 -> 2 -> 4 (merge of 2 and 3)
     \\-> 3 -/
    """
    return [
        CommitCommand(id="1", message="root"),
        CommitCommand(id="2", parents=["1"]),
        CommitCommand(id="3", parents=["1"]),
        CommitCommand(id="4", parents=["2", "3"]),
        BranchCommand(name="main", on="4"),
        TagCommand(name="v1", on="4"),
    ]


@pytest.fixture
def write_stream(tmp_path: Path):
    """Write raw command dicts to a JSON file and return its path."""

    def _write(records: list[dict], name: str = "commands.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
