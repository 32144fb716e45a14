# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from commit_graph.config.errors import InvalidConfigError, InvalidFileFormatError, InvalidFilePathError

if TYPE_CHECKING:
    from commit_graph.config.commands import CommandT

logger = logging.getLogger(__name__)


def load_config_file(file_path: Path) -> Any:
    """Load a YAML (or JSON) configuration file.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed YAML content

    Raises:
        InvalidFilePathError: If file doesn't exist
        InvalidFileFormatError: If YAML is malformed
        InvalidConfigError: If file is empty
    """
    if not file_path.is_file():
        raise InvalidFilePathError(f"Configuration file not found: {file_path}")

    try:
        with open(file_path, encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if content is None:
            raise InvalidConfigError(f"Configuration file is empty: {file_path}")

        return content

    except yaml.YAMLError as e:
        raise InvalidFileFormatError(f"Invalid YAML format in {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise InvalidFileFormatError(f"Configuration file {file_path} is not valid UTF-8: {e}") from e


def _decode_json_lines(text: str) -> list[Any]:
    records = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise InvalidFileFormatError(f"🛑 Line {line_number} of the command stream is not valid JSON: {e}") from e
    return records


def parse_command_stream(text: str) -> list[CommandT]:
    """Parse a command stream given as text.

    The stream is either a single JSON array of command objects or JSON Lines
    (one command object per line).

    Raises:
        InvalidFileFormatError: If the text is neither a JSON array nor JSON Lines.
        InvalidCommandStreamError: If an entry is not a valid command.
    """
    from commit_graph.config.commands import parse_commands

    if not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        logger.debug("Command stream is not a single JSON document, reading it as JSON Lines")
        data = _decode_json_lines(text)
    else:
        if isinstance(data, dict):
            data = [data]

    return parse_commands(data)


def read_command_stream(file_path: Path) -> list[CommandT]:
    """Read and parse a command stream from a file.

    Raises:
        InvalidFilePathError: If the path is not a file.
        InvalidFileFormatError: If the file is not UTF-8 or is neither a JSON array nor JSON Lines.
        InvalidCommandStreamError: If an entry is not a valid command.
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise InvalidFilePathError(f"🛑 Path {file_path} is not a file.")
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidFileFormatError(f"🛑 Command stream in {file_path} is not valid UTF-8: {e}") from e
    return parse_command_stream(text)
