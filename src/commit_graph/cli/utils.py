# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from pathlib import Path

from commit_graph.config.commands import CommandT
from commit_graph.config.errors import InvalidFileFormatError
from commit_graph.config.utils.io_helpers import parse_command_stream, read_command_stream


def read_commands(input_path: Path | None) -> list[CommandT]:
    """Read a command stream from a file, or from stdin when no file is given.

    Raises:
        InvalidFilePathError: If the file doesn't exist
        InvalidFileFormatError: If the stream is not UTF-8, or is neither a JSON array nor JSON Lines
        InvalidCommandStreamError: If an entry is not a valid command
    """
    if input_path is not None:
        return read_command_stream(input_path)

    try:
        text = sys.stdin.read()
    except UnicodeDecodeError as e:
        raise InvalidFileFormatError(f"🛑 Command stream on stdin is not valid UTF-8: {e}") from e
    return parse_command_stream(text)
