# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from commit_graph.config.commands import (
    BranchCommand,
    CommandT,
    CommandType,
    CommitCommand,
    ConfigCommand,
    TagCommand,
    parse_commands,
)
from commit_graph.config.graph_params import GraphParams, count_tree_commits

__all__ = [
    "BranchCommand",
    "CommandT",
    "CommandType",
    "CommitCommand",
    "ConfigCommand",
    "GraphParams",
    "TagCommand",
    "count_tree_commits",
    "parse_commands",
]
