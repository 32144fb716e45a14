# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Append-only command log produced by one generation run.

The log is the contract handed to the repository builder: commands are kept in
insertion order and every command may only reference commits that were appended
before it. The generator freezes the log before returning it, after which it is
read-only.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, overload

from commit_graph.config.commands import CommitCommand, TagCommand
from commit_graph.engine.errors import (
    CommandOrderError,
    DuplicateCommitError,
    DuplicateTagError,
    FrozenCommandLogError,
)

LoggedCommand = CommitCommand | TagCommand


class CommandLog:
    """Ordered, append-only sequence of commit and tag commands.

    Examples:
        >>> log = CommandLog()
        >>> log.append_commit(CommitCommand(id="1", message="Commit 1"))
        >>> log.append_tag(TagCommand(name="tag-1", on="1"))
        >>> len(log), log.num_commits, log.num_tags
        (2, 1, 1)
    """

    def __init__(self, commands: Iterable[LoggedCommand] = ()) -> None:
        self._commands: list[LoggedCommand] = []
        self._commit_ids: set[str] = set()
        self._tagged_ids: set[str] = set()
        self._num_commits = 0
        self._frozen = False
        for command in commands:
            self.append(command)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def num_commits(self) -> int:
        return self._num_commits

    @property
    def num_tags(self) -> int:
        return len(self._commands) - self._num_commits

    @property
    def commits(self) -> list[CommitCommand]:
        return [c for c in self._commands if isinstance(c, CommitCommand)]

    @property
    def tags(self) -> list[TagCommand]:
        return [c for c in self._commands if isinstance(c, TagCommand)]

    def has_commit(self, commit_id: str) -> bool:
        return commit_id in self._commit_ids

    def append(self, command: LoggedCommand) -> None:
        """Append a commit or tag command, dispatching on its type."""
        if isinstance(command, CommitCommand):
            self.append_commit(command)
        elif isinstance(command, TagCommand):
            self.append_tag(command)
        else:
            raise TypeError(f"A command log only holds commit and tag commands, got {type(command).__name__}")

    def append_commit(self, command: CommitCommand) -> None:
        """Append a commit.

        Raises:
            FrozenCommandLogError: If the log has been frozen.
            DuplicateCommitError: If a commit with the same id was already appended.
            CommandOrderError: If a parent has not been appended yet.
        """
        self._check_not_frozen()
        if command.id in self._commit_ids:
            raise DuplicateCommitError(f"Commit {command.id!r} is already in the command log")
        missing = [parent for parent in command.parents if parent not in self._commit_ids]
        if missing:
            raise CommandOrderError(
                f"Commit {command.id!r} references parents that have not been created yet: {missing}"
            )
        self._commands.append(command)
        self._commit_ids.add(command.id)
        self._num_commits += 1

    def append_tag(self, command: TagCommand) -> None:
        """Append a tag.

        Raises:
            FrozenCommandLogError: If the log has been frozen.
            CommandOrderError: If the tagged commit has not been appended yet.
            DuplicateTagError: If the commit is already tagged.
        """
        self._check_not_frozen()
        if command.on not in self._commit_ids:
            raise CommandOrderError(f"Tag {command.name!r} targets commit {command.on!r} before it was created")
        if command.on in self._tagged_ids:
            raise DuplicateTagError(f"Commit {command.on!r} is already tagged")
        self._commands.append(command)
        self._tagged_ids.add(command.on)

    def freeze(self) -> CommandLog:
        """Make the log read-only and return it."""
        self._frozen = True
        return self

    def to_dicts(self) -> list[dict[str, Any]]:
        """Render the commands as JSON-compatible dicts, in order, without unset optional fields."""
        return [command.model_dump(mode="json", exclude_none=True) for command in self._commands]

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise FrozenCommandLogError("The command log is frozen and can no longer be appended to")

    def __iter__(self) -> Iterator[LoggedCommand]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    @overload
    def __getitem__(self, index: int) -> LoggedCommand: ...

    @overload
    def __getitem__(self, index: slice) -> list[LoggedCommand]: ...

    def __getitem__(self, index: int | slice) -> LoggedCommand | list[LoggedCommand]:
        return self._commands[index]

    def __repr__(self) -> str:
        return f"CommandLog(commits={self.num_commits}, tags={self.num_tags}, frozen={self._frozen})"
