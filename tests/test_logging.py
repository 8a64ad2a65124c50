"""Tests for sdk_codegen.logging_config."""

from __future__ import annotations

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from sdk_codegen.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


def test_get_logger_namespaces_names() -> None:
    assert get_logger("sdk_codegen.core.model").name == "sdk_codegen.core.model"
    assert get_logger("plugins").name == "sdk_codegen.plugins"
    assert get_logger(PACKAGE_LOGGER).name == PACKAGE_LOGGER


def test_setup_logging_replaces_handler() -> None:
    logger = setup_logging(logging.DEBUG)
    first = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(first) == 1

    logger = setup_logging(logging.WARNING, rich_output=False)
    assert not any(isinstance(h, RichHandler) for h in logger.handlers)
    assert logger.level == logging.WARNING


def test_records_reach_rich_console() -> None:
    buffer = io.StringIO()
    setup_logging(logging.INFO, console=Console(file=buffer, width=120))
    get_logger(__name__).info("Generated dart SDK")
    assert "Generated dart SDK" in buffer.getvalue()
