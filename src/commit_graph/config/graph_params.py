# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from pydantic import Field, ValidationError, field_validator, model_validator
from typing_extensions import Self

from commit_graph.config.base import ConfigBase
from commit_graph.config.errors import InvalidGraphParametersError
from commit_graph.config.utils.constants import DEFAULT_MAX_COMMITS, DEFAULT_MAX_DEPTH, DEFAULT_PATH_FILE_NAME
from commit_graph.config.utils.io_helpers import load_config_file

logger = logging.getLogger(__name__)

StrictPositiveInt = Annotated[int, Field(strict=True, ge=1)]


def count_tree_commits(depth: int, branching_factor: int, *, limit: int | None = None) -> int:
    """Count the commits of a full ``branching_factor``-ary tree of ``depth`` generations.

    The sum ``1 + b + b**2 + ... + b**(depth - 1)`` is accumulated generation by
    generation. When ``limit`` is given the count stops as soon as it exceeds the
    limit and ``limit + 1`` is returned, so huge parameters are never expanded.
    """
    if branching_factor == 1:
        return depth if limit is None else min(depth, limit + 1)

    total = 0
    generation_size = 1
    for _ in range(depth):
        total += generation_size
        if limit is not None and total > limit:
            return limit + 1
        generation_size *= branching_factor
    return total


class GraphParams(ConfigBase):
    """Parameters of one commit-graph generation run.

    Attributes:
        depth: Number of generations from the root to the leaves, inclusive.
        branching_factor: Number of children spawned by every non-leaf commit.
        path_file_name: Name of the single file written into every commit's tree.
            Its contents are the commit's ancestry path.
        max_commits: Upper bound on the number of commits the parameters may produce.
        max_depth: Upper bound on ``depth``.
    """

    depth: StrictPositiveInt
    branching_factor: StrictPositiveInt
    path_file_name: str = Field(default=DEFAULT_PATH_FILE_NAME, min_length=1)
    max_commits: StrictPositiveInt = DEFAULT_MAX_COMMITS
    max_depth: StrictPositiveInt = DEFAULT_MAX_DEPTH

    @field_validator("path_file_name")
    @classmethod
    def validate_path_file_name(cls, v: str) -> str:
        if "/" in v or v in {".", ".."}:
            raise ValueError(f"path_file_name must be a plain file name, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_graph_size(self) -> Self:
        if self.depth > self.max_depth:
            raise ValueError(f"depth {self.depth} exceeds the maximum depth of {self.max_depth}")
        if count_tree_commits(self.depth, self.branching_factor, limit=self.max_commits) > self.max_commits:
            raise ValueError(
                f"depth={self.depth} with branching_factor={self.branching_factor} "
                f"would generate more than {self.max_commits} commits"
            )
        return self

    @property
    def num_commits(self) -> int:
        return count_tree_commits(self.depth, self.branching_factor)

    @property
    def num_leaves(self) -> int:
        return self.branching_factor ** (self.depth - 1)

    @classmethod
    def from_kwargs(cls, **kwargs) -> GraphParams:
        """Build parameters, converting validation failures to InvalidGraphParametersError."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise InvalidGraphParametersError(f"🛑 Invalid graph parameters: {e}") from e

    @classmethod
    def from_file(cls, file_path: Path, **overrides) -> GraphParams:
        """Load parameters from a YAML or JSON file.

        Args:
            file_path: Path to the file. It must contain a mapping of GraphParams fields.
            overrides: Field values that take precedence over the file's values.
                ``None`` values are ignored.

        Raises:
            InvalidFilePathError: If the file does not exist.
            InvalidFileFormatError: If the file is not valid YAML/JSON.
            InvalidGraphParametersError: If the resulting parameters are invalid.
        """
        content = load_config_file(Path(file_path))
        if not isinstance(content, dict):
            raise InvalidGraphParametersError(f"🛑 Expected a mapping of graph parameters in {file_path}")
        logger.debug(f"Loaded graph parameters from {str(file_path)!r}")
        content.update({key: value for key, value in overrides.items() if value is not None})
        return cls.from_kwargs(**content)
