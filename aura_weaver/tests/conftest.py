"""Shared fixtures for Aura Weaver tests."""
import pytest

from aura_weaver.engine import build_scene


@pytest.fixture
def happy_scene():
    return build_scene("happy", 10)


@pytest.fixture
def busy_scene():
    """Capped particle and waveform counts."""
    return build_scene("mysterious journey through the chain", 6000)
