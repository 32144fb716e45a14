# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path
from typing import Optional

import typer

from commit_graph.cli.ui import console, print_error, print_header, print_info, print_success, print_warning
from commit_graph.cli.utils import read_commands
from commit_graph.config.errors import InvalidCommandStreamError, InvalidFileFormatError, InvalidFilePathError
from commit_graph.engine.validation import validate_command_log


def validate_command(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Read the command stream from this file instead of stdin.",
    ),
) -> None:
    """Check that a command stream only references commits created earlier in the stream."""
    source = str(input_path) if input_path else "stdin"

    print_header("Command Stream Validation")
    print_info(f"Validating commands from: {source}")

    try:
        commands = read_commands(input_path)
    except InvalidFilePathError:
        print_error(f"Command stream file not found: {input_path}")
        raise typer.Exit(code=1)
    except InvalidFileFormatError as e:
        print_error(f"Invalid JSON format: {e}")
        raise typer.Exit(code=1)
    except InvalidCommandStreamError as e:
        print_error(f"Invalid commands: {e}")
        raise typer.Exit(code=1)

    issues = validate_command_log(commands)
    console.print()

    if not commands:
        print_warning("Command stream is empty")

    if not issues:
        print_success(f"All {len(commands)} commands are valid")
        raise typer.Exit(0)

    print_error(f"Found {len(issues)} issue(s) in {len(commands)} commands")
    for issue in issues:
        print_info(f"  - {issue}")
    raise typer.Exit(code=1)
