# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from commit_graph.config.commands import BranchCommand, CommandT, CommitCommand, TagCommand
from commit_graph.engine.graph_generator import GraphGenerator
from commit_graph.engine.validation import ValidationIssue, validate_command_log


def test_generated_streams_are_valid(generator: GraphGenerator) -> None:
    for depth, branching_factor in [(1, 1), (3, 2), (4, 3), (6, 1)]:
        assert validate_command_log(generator.generate(depth=depth, branching_factor=branching_factor)) == []


def test_hand_written_merge_stream_is_valid(merge_commands: list[CommandT]) -> None:
    assert validate_command_log(merge_commands) == []


def test_parent_must_come_first() -> None:
    issues = validate_command_log(
        [
            CommitCommand(id="2", parents=["1"]),
            CommitCommand(id="1"),
        ]
    )
    assert issues == [ValidationIssue(0, "commit", "commit '2' has parent '1' that is not an earlier commit")]


def test_self_parent_is_reported() -> None:
    issues = validate_command_log([CommitCommand(id="1", parents=["1"])])
    assert len(issues) == 1
    assert "not an earlier commit" in issues[0].message


def test_duplicate_commit_id() -> None:
    issues = validate_command_log([CommitCommand(id="1"), CommitCommand(id="1")])
    assert [str(issue) for issue in issues] == ["[1] commit: duplicate commit id '1'"]


def test_tag_and_branch_targets_must_exist() -> None:
    issues = validate_command_log(
        [
            TagCommand(name="v1", on="1"),
            BranchCommand(name="main", on="1"),
            CommitCommand(id="1"),
        ]
    )
    assert [(issue.index, issue.command_type) for issue in issues] == [(0, "tag"), (1, "branch")]
    assert "before it exists" in issues[0].message
    assert "before it exists" in issues[1].message


def test_duplicate_tag_names_across_commands() -> None:
    issues = validate_command_log(
        [
            CommitCommand(id="1", tags=["v1"]),
            TagCommand(name="v1", on="1"),
            TagCommand(name="v2", on="1"),
            TagCommand(name="v2", on="1"),
        ]
    )
    assert [str(issue) for issue in issues] == [
        "[1] tag: duplicate tag name 'v1'",
        "[3] tag: duplicate tag name 'v2'",
    ]


def test_all_issues_are_reported_in_order() -> None:
    issues = validate_command_log(
        [
            CommitCommand(id="1", parents=["0"]),
            CommitCommand(id="1"),
            TagCommand(name="t", on="9"),
        ]
    )
    assert [issue.index for issue in issues] == [0, 1, 2]


def test_empty_stream_is_valid() -> None:
    assert validate_command_log([]) == []
