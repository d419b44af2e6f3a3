"""Fixtures for package manager command tests."""

import sys

import pytest

from infrastructure.configuration import settings


@pytest.fixture
def pacman_settings(monkeypatch):
    """Pin the configured commands so argument vectors are predictable."""
    monkeypatch.setattr(settings.pacman, "PACMAN_COMMAND", "pacman")
    monkeypatch.setattr(settings.pacman, "ELEVATION_COMMAND", "sudo")
    return settings.pacman


@pytest.fixture
def python_as_pacman(monkeypatch):
    """Use the running interpreter as a stand-in package manager."""
    monkeypatch.setattr(settings.pacman, "PACMAN_COMMAND", sys.executable)
    return sys.executable
