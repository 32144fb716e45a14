# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

LIBRARY_LOGGER_NAME = "commit_graph"


@dataclass(frozen=True)
class LoggingConfig:
    """How commit-graph log records are displayed.

    Records always go to stderr; stdout is reserved for the command stream.
    """

    level: int = logging.INFO
    show_time: bool = True
    show_path: bool = False

    @classmethod
    def default(cls) -> LoggingConfig:
        return cls()

    @classmethod
    def quiet(cls) -> LoggingConfig:
        return cls(level=logging.WARNING, show_time=False)

    @classmethod
    def debug(cls) -> LoggingConfig:
        return cls(level=logging.DEBUG, show_path=True)


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Install a rich stderr handler on the library logger.

    Calling this again replaces the handler installed by the previous call.
    """
    config = config or LoggingConfig.default()
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, "_commit_graph_handler", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=config.show_time,
        show_path=config.show_path,
        markup=False,
        rich_tracebacks=False,
    )
    handler._commit_graph_handler = True
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(config.level)
    logger.propagate = False
    return logger
