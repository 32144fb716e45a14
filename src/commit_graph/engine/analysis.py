# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Read-only queries over a command stream.

The index works on any command stream (not only generated ones), so merge
commits with several parents are handled even though the generator never
produces them.
"""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from commit_graph.config.commands import BranchCommand, CommandT, CommitCommand, TagCommand

T = TypeVar("T")


def can_fastforward(nodes: Sequence[T], is_ancestor: Callable[[T, T], bool]) -> T | None:
    """Find the commit every other commit in ``nodes`` can be fast-forwarded to.

    Fast-forwarding is possible only when every pair of commits is related, i.e.
    one is an ancestor of the other. The result is then the most recent commit.
    All pairs are compared, which takes ``n * (n - 1) / 2`` checks.

    Args:
        nodes: The commits to reconcile.
        is_ancestor: ``is_ancestor(a, b)`` is True when ``a`` is ``b`` or an ancestor of ``b``.

    Returns:
        The most recent commit, the only commit when ``nodes`` has one element, or
        None when ``nodes`` is empty or contains two unrelated commits.

    Example:
        >>> parents = {2: 1, 3: 2}
        >>> def is_ancestor(a, b):
        ...     while b is not None:
        ...         if a == b:
        ...             return True
        ...         b = parents.get(b)
        ...     return False
        >>> can_fastforward([1, 3, 2], is_ancestor)
        3
    """
    if len(nodes) == 1:
        return nodes[0]

    most_recent: T | None = None
    for i, a in enumerate(nodes):
        for b in nodes[i + 1 :]:
            if is_ancestor(a, b):
                old, new = a, b
            elif is_ancestor(b, a):
                old, new = b, a
            else:
                return None

            if most_recent is None or most_recent == old:
                most_recent = new

    return most_recent


@dataclass(frozen=True)
class GraphSummary:
    num_commits: int
    num_tags: int
    num_branches: int
    num_roots: int
    num_leaves: int
    num_merges: int
    max_generation: int

    def to_dict(self) -> dict[str, int]:
        return {
            "commits": self.num_commits,
            "tags": self.num_tags,
            "branches": self.num_branches,
            "roots": self.num_roots,
            "leaves": self.num_leaves,
            "merges": self.num_merges,
            "max_generation": self.max_generation,
        }


class CommitGraphIndex:
    """Parent/child index over the commits of a command stream.

    Parents that do not refer to a known commit are ignored. Use
    ``commit_graph.engine.validation`` to report them.
    """

    def __init__(self) -> None:
        self._order: list[str] = []
        self._parents: dict[str, list[str]] = {}
        self._children: dict[str, list[str]] = defaultdict(list)
        self._generation: dict[str, int] = {}
        self._tags: dict[str, list[str]] = defaultdict(list)
        self._num_tags = 0
        self._num_branches = 0

    @classmethod
    def from_commands(cls, commands: Iterable[CommandT]) -> CommitGraphIndex:
        index = cls()
        for command in commands:
            if isinstance(command, CommitCommand):
                index._add_commit(command)
            elif isinstance(command, TagCommand):
                index._tags[command.on].append(command.name)
                index._num_tags += 1
            elif isinstance(command, BranchCommand):
                index._num_branches += 1
        return index

    def _add_commit(self, commit: CommitCommand) -> None:
        if commit.id in self._parents:
            return
        parents = [parent for parent in commit.parents if parent in self._parents]
        self._order.append(commit.id)
        self._parents[commit.id] = parents
        for parent in parents:
            self._children[parent].append(commit.id)
        self._generation[commit.id] = 1 + max((self._generation[p] for p in parents), default=0)

    def __contains__(self, commit_id: str) -> bool:
        return commit_id in self._parents

    def __len__(self) -> int:
        return len(self._order)

    @property
    def commit_ids(self) -> list[str]:
        return list(self._order)

    @property
    def roots(self) -> list[str]:
        return [commit_id for commit_id in self._order if not self._parents[commit_id]]

    @property
    def leaves(self) -> list[str]:
        return [commit_id for commit_id in self._order if not self._children.get(commit_id)]

    def parents_of(self, commit_id: str) -> list[str]:
        return list(self._get_parents(commit_id))

    def children_of(self, commit_id: str) -> list[str]:
        self._get_parents(commit_id)
        return list(self._children.get(commit_id, []))

    def tags_on(self, commit_id: str) -> list[str]:
        self._get_parents(commit_id)
        return list(self._tags.get(commit_id, []))

    def generation_of(self, commit_id: str) -> int:
        """Length of the longest path from a root to the commit, counting both ends."""
        self._get_parents(commit_id)
        return self._generation[commit_id]

    def is_ancestor(self, ancestor: str, descendant: str) -> bool:
        """True when ``ancestor`` is ``descendant`` or reachable through its parents."""
        self._get_parents(ancestor)
        self._get_parents(descendant)
        if self._generation[ancestor] > self._generation[descendant]:
            return False

        seen = {descendant}
        queue = deque([descendant])
        while queue:
            current = queue.popleft()
            if current == ancestor:
                return True
            for parent in self._parents[current]:
                if parent not in seen:
                    seen.add(parent)
                    queue.append(parent)
        return False

    def ancestry(self, commit_id: str) -> list[str]:
        """Ids from a root down to ``commit_id``, following first parents."""
        path = [commit_id]
        parents = self._get_parents(commit_id)
        while parents:
            path.append(parents[0])
            parents = self._parents[parents[0]]
        path.reverse()
        return path

    def can_fastforward(self, commit_ids: Sequence[str]) -> str | None:
        for commit_id in commit_ids:
            self._get_parents(commit_id)
        return can_fastforward(commit_ids, self.is_ancestor)

    def summary(self) -> GraphSummary:
        return GraphSummary(
            num_commits=len(self._order),
            num_tags=self._num_tags,
            num_branches=self._num_branches,
            num_roots=len(self.roots),
            num_leaves=len(self.leaves),
            num_merges=sum(1 for parents in self._parents.values() if len(parents) > 1),
            max_generation=max(self._generation.values(), default=0),
        )

    def _get_parents(self, commit_id: str) -> list[str]:
        try:
            return self._parents[commit_id]
        except KeyError:
            raise KeyError(f"Unknown commit id: {commit_id!r}") from None
