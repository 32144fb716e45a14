# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Sequential commit identifiers.

Identifiers are the string rendering of a counter owned by one generation run.
They are only unique within that run, so every run creates its own allocator.
"""

from __future__ import annotations


class SequentialIdAllocator:
    """Hands out "1", "2", "3", ... in allocation order.

    Examples:
        >>> allocator = SequentialIdAllocator()
        >>> allocator.allocate(), allocator.allocate()
        ('1', '2')
        >>> allocator.count
        2
    """

    __slots__ = ("_count",)

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._count = start

    @property
    def count(self) -> int:
        """The number of identifiers allocated so far (the last identifier, as an int)."""
        return self._count

    def allocate(self) -> str:
        self._count += 1
        return str(self._count)

    def __repr__(self) -> str:
        return f"SequentialIdAllocator(count={self._count})"
