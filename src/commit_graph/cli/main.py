# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import typer

from commit_graph.logging import LoggingConfig, configure_logging

# Initialize Typer app with custom configuration
app = typer.Typer(
    name="commit-graph",
    help="Commit Graph CLI - Generate command streams describing synthetic commit graphs",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def configure(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Log progress (-v) or debug details (-vv)."),
) -> None:
    """Generate, validate and inspect commit graph command streams."""
    if verbose >= 2:
        configure_logging(LoggingConfig.debug())
    elif verbose == 1:
        configure_logging(LoggingConfig.default())
    else:
        configure_logging(LoggingConfig.quiet())


# Import and register commands
# We import here to avoid circular dependencies
from commit_graph.cli.commands import generate, validate
from commit_graph.cli.commands import inspect as inspect_cmd

app.command(name="generate")(generate.generate_command)
app.command(name="validate")(validate.validate_command)
app.command(name="inspect")(inspect_cmd.inspect_command)
app.command(name="can-fastforward")(inspect_cmd.can_fastforward_command)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
