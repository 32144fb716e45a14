# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from commit_graph.config.commands import BranchCommand, CommandT, CommitCommand, TagCommand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationIssue:
    """A broken ordering or uniqueness rule in a command stream.

    Attributes:
        index: Position (0-based) of the offending command in the stream.
        command_type: The ``type`` of the offending command.
        message: Human-readable description of the problem.
    """

    index: int
    command_type: str
    message: str

    def __str__(self) -> str:
        return f"[{self.index}] {self.command_type}: {self.message}"


def validate_command_log(commands: Iterable[CommandT]) -> list[ValidationIssue]:
    """Check the ordering rules the repository builder relies on.

    The builder processes commands one at a time, so every reference must point
    at a commit created earlier in the stream:

    - commit ids are unique;
    - every parent of a commit is an earlier commit;
    - every tag and branch targets an earlier commit;
    - tag names are unique.

    Returns:
        All issues found, in stream order. An empty list means the stream is valid.
    """
    issues: list[ValidationIssue] = []
    commit_ids: set[str] = set()
    tag_names: set[str] = set()

    for index, command in enumerate(commands):
        if isinstance(command, CommitCommand):
            if command.id in commit_ids:
                issues.append(ValidationIssue(index, "commit", f"duplicate commit id {command.id!r}"))
            for parent in command.parents:
                if parent == command.id or parent not in commit_ids:
                    message = f"commit {command.id!r} has parent {parent!r} that is not an earlier commit"
                    issues.append(ValidationIssue(index, "commit", message))
            commit_ids.add(command.id)
            for tag_name in command.tags or []:
                if tag_name in tag_names:
                    issues.append(ValidationIssue(index, "commit", f"duplicate tag name {tag_name!r}"))
                tag_names.add(tag_name)
        elif isinstance(command, TagCommand):
            if command.on not in commit_ids:
                issues.append(
                    ValidationIssue(index, "tag", f"tag {command.name!r} targets {command.on!r} before it exists")
                )
            if command.name in tag_names:
                issues.append(ValidationIssue(index, "tag", f"duplicate tag name {command.name!r}"))
            tag_names.add(command.name)
        elif isinstance(command, BranchCommand):
            if command.on not in commit_ids:
                issues.append(
                    ValidationIssue(index, "branch", f"branch {command.name!r} targets {command.on!r} before it exists")
                )

    if issues:
        logger.warning(f"⚠️ Command stream has {len(issues)} issue(s)")
    return issues
