# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from commit_graph.errors import CommitGraphError


class InvalidConfigError(CommitGraphError):
    """Exception for all errors related to invalid configuration."""


class InvalidGraphParametersError(InvalidConfigError, ValueError):
    """Depth or branching factor (or a resource cap) is not acceptable."""


class InvalidCommandStreamError(InvalidConfigError):
    """A command stream could not be parsed into known commands."""


class InvalidFilePathError(InvalidConfigError):
    """A file path does not exist or does not point to a file."""


class InvalidFileFormatError(InvalidConfigError):
    """A file exists but its contents are not valid YAML/JSON."""
