"""
Basic test fixtures for the skirmish test suite.

Provides simple fixtures for characters, armies and the battle log.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from src.game.army_loader import Army
from src.game.entities.character import Archer, Warrior, Wizard
from src.game.log_manager import LogManager, LogLevel


@pytest.fixture
def warrior():
    return Warrior()


@pytest.fixture
def wizard():
    return Wizard()


@pytest.fixture
def archer():
    return Archer()


@pytest.fixture
def sample_army():
    """Create the reference army: two warriors, a wizard and an archer."""
    return [Warrior(), Wizard(), Archer(), Warrior()]


@pytest.fixture
def log_manager():
    """Create a log manager that keeps debug messages visible."""
    return LogManager(default_level=LogLevel.DEBUG)


@pytest.fixture
def vanguard(sample_army):
    """Create a named army wrapping the reference characters."""
    return Army(name="Vanguard", description="Test army", characters=list(sample_army))


@pytest.fixture
def roster_file(tmp_path):
    """Write a small roster to a temporary YAML file and return its path."""
    path = tmp_path / "roster.yaml"
    path.write_text(
        "name: Test Roster\n"
        "units:\n"
        "  - class: WARRIOR\n"
        "    count: 2\n"
        "  - class: wizard\n"
        "  - class: Archer\n",
        encoding="utf-8",
    )
    return str(path)
