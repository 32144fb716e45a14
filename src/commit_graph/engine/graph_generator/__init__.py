# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Commit-graph generation.

Example:
    >>> from commit_graph.engine.graph_generator import GraphGenerator
    >>>
    >>> log = GraphGenerator().generate(depth=3, branching_factor=2)
    >>> log.num_commits, log.num_tags
    (7, 4)
"""

from commit_graph.engine.graph_generator.ancestry import AncestryPath
from commit_graph.engine.graph_generator.command_log import CommandLog, LoggedCommand
from commit_graph.engine.graph_generator.generator import GraphGenerator
from commit_graph.engine.graph_generator.node_id import SequentialIdAllocator

__all__ = [
    "AncestryPath",
    "CommandLog",
    "GraphGenerator",
    "LoggedCommand",
    "SequentialIdAllocator",
]
