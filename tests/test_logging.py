# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from commit_graph.logging import LIBRARY_LOGGER_NAME, LoggingConfig, configure_logging


@pytest.fixture(autouse=True)
def restore_library_logger() -> Iterator[None]:
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def _installed_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "_commit_graph_handler", False)]


def test_configure_logging_installs_rich_handler() -> None:
    logger = configure_logging()
    handlers = _installed_handlers(logger)
    assert logger.name == "commit_graph"
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_configure_logging_replaces_previous_handler() -> None:
    configure_logging(LoggingConfig.debug())
    logger = configure_logging(LoggingConfig.quiet())
    assert len(_installed_handlers(logger)) == 1
    assert logger.level == logging.WARNING


def test_module_loggers_inherit_level() -> None:
    configure_logging(LoggingConfig.quiet())
    engine_logger = logging.getLogger("commit_graph.engine.graph_generator.generator")
    assert not engine_logger.isEnabledFor(logging.INFO)
    assert engine_logger.isEnabledFor(logging.WARNING)


@pytest.mark.parametrize(
    "config,level",
    [
        (LoggingConfig.default(), logging.INFO),
        (LoggingConfig.quiet(), logging.WARNING),
        (LoggingConfig.debug(), logging.DEBUG),
    ],
)
def test_presets(config: LoggingConfig, level: int) -> None:
    assert config.level == level
