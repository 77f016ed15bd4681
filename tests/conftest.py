# tests/conftest.py

"""Shared pytest fixtures for all browser tests."""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

from multipane_shop.config.settings import Settings


@pytest.fixture(autouse=True)
def clear_orientation_override() -> Generator[None, None, None]:
    """Keep a developer's .env orientation from leaking into tests."""
    with patch.dict(os.environ):
        os.environ.pop(Settings.ORIENTATION_ENV_VAR, None)
        yield
