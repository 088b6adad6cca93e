# SPDX-License-Identifier: MIT
"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from semver_order.log import ROOT_LOGGER


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Undo the logging setup performed by setup_logging during a test."""
    root = logging.getLogger(ROOT_LOGGER)
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate
