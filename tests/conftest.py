# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING

import hypothesis
import pytest

from jopenssl._internals import cli_machinery

if TYPE_CHECKING:
    from collections.abc import Iterator

# https://hypothesis.readthedocs.io/en/latest/settings.html#settings-profiles
hypothesis.settings.register_profile('ci', max_examples=1000)
hypothesis.settings.register_profile('dev', max_examples=10)
hypothesis.settings.register_profile(
    'debug', max_examples=10, verbosity=hypothesis.Verbosity.verbose
)
hypothesis.settings.register_profile(
    'flaky', deadline=datetime.timedelta(milliseconds=150)
)


@pytest.fixture(autouse=True)
def reset_cli_logging_levels() -> Iterator[None]:
    """Undo any logging level changes made by `-v`, `-q` or `--debug`."""
    handler = cli_machinery.StandardCLILogging.cli_handler
    logger = logging.getLogger(cli_machinery.StandardCLILogging.package_name)
    handler_level = handler.level
    logger_level = logger.level
    try:
        yield
    finally:
        handler.setLevel(handler_level)
        logger.setLevel(logger_level)
