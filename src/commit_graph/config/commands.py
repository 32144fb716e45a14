# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Command vocabulary understood by the repository builder.

A command stream is an ordered list of JSON objects, each discriminated by its
``type`` field. The graph generator only ever emits ``commit`` and ``tag``
commands; ``branch`` and ``config`` are modeled so that streams written by hand
(or by other tools) for the same builder can be read, validated and inspected.

Field declaration order is significant: it is the key order of the serialized
objects.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from typing_extensions import TypeAlias

from commit_graph.config.base import ConfigBase
from commit_graph.config.errors import InvalidCommandStreamError


class CommandType(str, Enum):
    COMMIT = "commit"
    TAG = "tag"
    BRANCH = "branch"
    CONFIG = "config"


def _validate_tree_entries(tree: dict[str, Any], prefix: str = "") -> None:
    for name, entry in tree.items():
        full_name = f"{prefix}{name}"
        if not isinstance(name, str) or not name:
            raise ValueError(f"Tree entry names must be non-empty strings, got {name!r}")
        if isinstance(entry, dict):
            _validate_tree_entries(entry, prefix=f"{full_name}/")
        elif not isinstance(entry, str):
            raise ValueError(
                f"Tree entry {full_name!r} must be file contents (str) or a directory (mapping), "
                f"got {type(entry).__name__}"
            )


class CommandBase(ConfigBase):
    model_config = ConfigDict(extra="ignore", frozen=True, validate_default=True)


class CommitCommand(CommandBase):
    """Creates one commit.

    Attributes:
        id: Stream-local identifier of the commit. Later commands refer to it.
        message: The commit message.
        parents: Ids of the parent commits, in order. Empty for a root commit.
        tree: Files of the commit keyed by path. Values are file contents, or
            nested mappings for directories. When omitted, the builder's default
            tree is used.
        branches: Branch names to point at this commit once it is created.
        tags: Lightweight tag names to point at this commit once it is created.
    """

    type: Literal[CommandType.COMMIT] = CommandType.COMMIT
    id: str = Field(min_length=1)
    message: str = ""
    parents: list[str] = Field(default_factory=list)
    tree: Optional[dict[str, Any]] = None
    branches: Optional[list[str]] = None
    tags: Optional[list[str]] = None

    @field_validator("tree")
    @classmethod
    def validate_tree(cls, v: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
        if v is not None:
            _validate_tree_entries(v)
        return v

    @property
    def is_root(self) -> bool:
        return not self.parents

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1


class TagCommand(CommandBase):
    """Creates a tag named ``name`` on the commit ``on``.

    ``lightweight`` is left unset by the generator; the builder creates an
    annotated tag in that case.
    """

    type: Literal[CommandType.TAG] = CommandType.TAG
    name: str = Field(min_length=1)
    on: str = Field(min_length=1)
    lightweight: Optional[bool] = None


class BranchCommand(CommandBase):
    type: Literal[CommandType.BRANCH] = CommandType.BRANCH
    name: str = Field(min_length=1)
    on: str = Field(min_length=1)


class ConfigCommand(CommandBase):
    """Changes the builder's default identities and default tree for later commands."""

    type: Literal[CommandType.CONFIG] = CommandType.CONFIG
    all_name: Optional[str] = None
    all_email: Optional[str] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    committer_name: Optional[str] = None
    committer_email: Optional[str] = None
    tagger_name: Optional[str] = None
    tagger_email: Optional[str] = None
    tree: Optional[dict[str, Any]] = None

    @field_validator("tree")
    @classmethod
    def validate_tree(cls, v: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
        if v is not None:
            _validate_tree_entries(v)
        return v


CommandT: TypeAlias = Annotated[
    Union[CommitCommand, TagCommand, BranchCommand, ConfigCommand],
    Field(discriminator="type"),
]

_COMMAND_LIST_ADAPTER = TypeAdapter(list[CommandT])


def parse_commands(data: Any) -> list[CommandT]:
    """Validate raw command dicts into command models.

    Args:
        data: A list of mappings, typically the result of ``json.loads`` on a
            command stream.

    Returns:
        The validated commands, in input order.

    Raises:
        InvalidCommandStreamError: If ``data`` is not a list or any entry is not
            a valid command.
    """
    if not isinstance(data, list):
        raise InvalidCommandStreamError(
            f"🛑 A command stream must be a list of command objects, got {type(data).__name__}"
        )
    try:
        return _COMMAND_LIST_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise InvalidCommandStreamError(f"🛑 Invalid command stream: {e}") from e
