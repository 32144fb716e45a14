# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Generator for synthetic commit graphs.

The generated graph is a full ``branching_factor``-ary tree of commits. For
depth=3 and branching_factor=2:

    3   4   6   7      <- leaves, each tagged tag-<id>
     \\ /     \\ /
      2       5
       \\     /
          1            <- root, no parents

Ids are allocated in depth-first pre-order, so a commit's id is always greater
than the ids of its ancestors and every command only references commits that
were emitted before it. Commits never reconverge: every non-root commit has
exactly one parent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from commit_graph.config.commands import CommitCommand, TagCommand
from commit_graph.config.graph_params import GraphParams
from commit_graph.config.utils.constants import COMMIT_MESSAGE_TEMPLATE, TAG_NAME_TEMPLATE
from commit_graph.engine.graph_generator.ancestry import AncestryPath
from commit_graph.engine.graph_generator.command_log import CommandLog
from commit_graph.engine.graph_generator.node_id import SequentialIdAllocator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _PendingCommit:
    """A commit scheduled for creation.

    Attributes:
        generations_left: Generations still to build, counting this commit. 1 means leaf.
        parent: Ancestry path of the parent commit, or None for the root.
    """

    generations_left: int
    parent: AncestryPath | None


class GraphGenerator:
    """Builds the command log describing a synthetic commit tree.

    Every call to ``build``/``generate`` is an independent run with its own id
    allocator and command log, so a single generator can be reused and two runs
    with the same parameters produce identical logs.

    Example:
        >>> log = GraphGenerator().generate(depth=2, branching_factor=2)
        >>> [command.type for command in log]
        ['commit', 'commit', 'tag', 'commit', 'tag']
    """

    def generate(self, depth: int, branching_factor: int, **options) -> CommandLog:
        """Generate the command log for a tree of ``depth`` generations.

        Args:
            depth: Number of generations from the root to the leaves, inclusive.
            branching_factor: Number of children of every non-leaf commit.
            **options: Additional GraphParams fields (``path_file_name``,
                ``max_commits``, ``max_depth``).

        Returns:
            The frozen command log.

        Raises:
            InvalidGraphParametersError: If the parameters are not positive integers
                or exceed the resource caps. Nothing is generated in that case.
        """
        params = GraphParams.from_kwargs(depth=depth, branching_factor=branching_factor, **options)
        return self.build(params)

    def build(self, params: GraphParams) -> CommandLog:
        """Generate the command log for already validated parameters."""
        logger.info(
            f"🌳 Generating commit tree with depth={params.depth}, branching_factor={params.branching_factor} "
            f"({params.num_commits} commits, {params.num_leaves} tags)"
        )

        allocator = SequentialIdAllocator()
        log = CommandLog()

        # Explicit stack instead of recursion: popping the most recently pushed
        # commit first reproduces the depth-first pre-order of the recursive rule.
        stack = [_PendingCommit(generations_left=params.depth, parent=None)]
        while stack:
            pending = stack.pop()
            commit_id = allocator.allocate()
            path = AncestryPath.root(commit_id) if pending.parent is None else pending.parent.extend(commit_id)

            log.append_commit(self._make_commit(commit_id, path, pending.parent, params.path_file_name))

            if pending.generations_left <= 1:
                log.append_tag(self._make_tag(commit_id))
            else:
                child = _PendingCommit(generations_left=pending.generations_left - 1, parent=path)
                stack.extend(child for _ in range(params.branching_factor))

        logger.debug(f"Allocated {allocator.count} commit ids, emitted {len(log)} commands")
        return log.freeze()

    @staticmethod
    def _make_commit(
        commit_id: str,
        path: AncestryPath,
        parent: AncestryPath | None,
        path_file_name: str,
    ) -> CommitCommand:
        return CommitCommand(
            id=commit_id,
            message=COMMIT_MESSAGE_TEMPLATE.format(id=commit_id),
            parents=[] if parent is None else [parent.tip],
            tree={path_file_name: path.render()},
        )

    @staticmethod
    def _make_tag(commit_id: str) -> TagCommand:
        return TagCommand(name=TAG_NAME_TEMPLATE.format(id=commit_id), on=commit_id)
