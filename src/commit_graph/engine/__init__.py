# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from commit_graph.engine.analysis import CommitGraphIndex, GraphSummary, can_fastforward
from commit_graph.engine.emitter import CommandEmitter
from commit_graph.engine.graph_generator import CommandLog, GraphGenerator
from commit_graph.engine.validation import ValidationIssue, validate_command_log

__all__ = [
    "CommandEmitter",
    "CommandLog",
    "CommitGraphIndex",
    "GraphGenerator",
    "GraphSummary",
    "ValidationIssue",
    "can_fastforward",
    "validate_command_log",
]
