# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from commit_graph.errors import CommitGraphError


class CommandLogError(CommitGraphError):
    """Exception for all errors related to building a command log."""


class CommandOrderError(CommandLogError):
    """A command references a commit that has not been emitted yet."""


class DuplicateCommitError(CommandLogError):
    """A commit id was emitted more than once."""


class DuplicateTagError(CommandLogError):
    """A commit was tagged more than once."""


class FrozenCommandLogError(CommandLogError):
    """The command log was appended to after it was handed off."""


class CommandSerializationError(CommitGraphError):
    """The command log could not be rendered as JSON."""
