"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from structcopy import CopyEngine, EngineSettings, MemberRegistry, set_engine


@pytest.fixture
def fresh_default_engine():
    """Rebuild the module-level engine before and after the test."""
    set_engine(None)
    yield
    set_engine(None)


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return EngineSettings(cache_members=True, none_fits_any=True, numeric_promotion=True)


@pytest.fixture
def registry():
    """Fresh MemberRegistry."""
    return MemberRegistry()


@pytest.fixture
def engine(settings, registry):
    """Fresh CopyEngine with its own registry."""
    return CopyEngine(settings, registry)


@dataclass
class FixturePoint:
    x: float = 0.0
    y: float = 0.0


@dataclass
class FixtureLabelledPoint:
    x: float = 0.0
    y: float = 0.0
    label: str = ""


@pytest.fixture
def point_cls():
    return FixturePoint


@pytest.fixture
def labelled_point_cls():
    return FixtureLabelledPoint
