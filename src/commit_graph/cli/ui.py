# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from rich.console import Console
from rich.markup import escape

# Status messages go to stderr so that stdout can carry a command stream.
console = Console(stderr=True, soft_wrap=True)
output_console = Console()


def print_header(text: str) -> None:
    console.print()
    console.rule(f"[bold]{escape(text)}[/bold]")


def print_info(text: str) -> None:
    console.print(f"[cyan]i[/cyan] {escape(text)}", highlight=False)


def print_success(text: str) -> None:
    console.print(f"[green]✔[/green] {escape(text)}", highlight=False)


def print_warning(text: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {escape(text)}", highlight=False)


def print_error(text: str) -> None:
    console.print(f"[red]✘[/red] {escape(text)}", highlight=False)
