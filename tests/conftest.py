"""Shared test fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo log levels set by earlier CLI invocations."""
    yield
    logging.getLogger("jsexplain").setLevel(logging.NOTSET)
