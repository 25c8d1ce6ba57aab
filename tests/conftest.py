"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from tests.helpers import RecordingProgress


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()
