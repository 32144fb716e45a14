# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any, BinaryIO

from pydantic_core import PydanticSerializationError

from commit_graph.config.commands import CommandT
from commit_graph.engine.errors import CommandSerializationError

logger = logging.getLogger(__name__)


class CommandEmitter:
    """Serializes command logs to the JSON stream read by the repository builder.

    Commands are written in log order with their fields in declaration order.
    Optional fields that were never set are left out. No validation or value
    transformation happens here.

    Args:
        indent: Indentation of the JSON array output. ``None`` writes it on one line.
    """

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def serialize(self, commands: Iterable[CommandT]) -> bytes:
        """Render the commands as a UTF-8 encoded JSON array followed by a newline."""
        records = self._to_records(commands)
        return (self._dumps(records, indent=self.indent) + "\n").encode("utf-8")

    def serialize_lines(self, commands: Iterable[CommandT]) -> bytes:
        """Render the commands as JSON Lines, one compact object per line."""
        records = self._to_records(commands)
        return "".join(self._dumps(record, indent=None) + "\n" for record in records).encode("utf-8")

    def write(self, commands: Iterable[CommandT], stream: BinaryIO, *, lines: bool = False) -> int:
        """Write the serialized commands to a binary stream and return the number of bytes written."""
        payload = self.serialize_lines(commands) if lines else self.serialize(commands)
        stream.write(payload)
        logger.debug(f"Wrote {len(payload)} bytes of {'JSON Lines' if lines else 'JSON'} commands")
        return len(payload)

    @staticmethod
    def _to_records(commands: Iterable[CommandT]) -> list[dict[str, Any]]:
        try:
            return [command.model_dump(mode="json", exclude_none=True) for command in commands]
        except PydanticSerializationError as e:
            raise CommandSerializationError(f"🛑 Failed to serialize command log: {e}") from e

    @staticmethod
    def _dumps(value: Any, *, indent: int | None) -> str:
        try:
            return json.dumps(value, indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise CommandSerializationError(f"🛑 Failed to serialize command log: {e}") from e
