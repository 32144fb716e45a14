# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Ancestry paths of generated commits."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from commit_graph.config.utils.constants import PATH_SEPARATOR


@dataclass(frozen=True, slots=True)
class AncestryPath:
    """Ordered commit ids from the root down to a commit, inclusive.

    A commit's path is its parent's path with its own id appended, so the length
    of a path is the generation of the commit it ends at (1 for the root).

    Attributes:
        ids: The commit ids, root first.
    """

    ids: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.ids:
            raise ValueError("An ancestry path must contain at least one commit id")

    @classmethod
    def root(cls, commit_id: str) -> AncestryPath:
        return cls((commit_id,))

    def extend(self, commit_id: str) -> AncestryPath:
        return AncestryPath((*self.ids, commit_id))

    @property
    def tip(self) -> str:
        """The id of the commit the path ends at."""
        return self.ids[-1]

    def render(self, separator: str = PATH_SEPARATOR) -> str:
        return separator.join(self.ids)

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids)

    def __str__(self) -> str:
        return self.render()
