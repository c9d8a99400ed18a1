"""
Tests for loading army rosters from YAML.
"""
import os

import pytest

from src.core.data import CharacterClass
from src.game.army_loader import DEFAULT_ARMY_PATH, ArmyLoader, UnitEntry
from src.game.entities import Archer, Warrior, Wizard


class TestUnitEntry:
    """Test parsing of single roster entries."""

    def test_defaults_to_one(self):
        entry = UnitEntry.from_dict({"class": "ARCHER"})
        assert entry.character_class is CharacterClass.ARCHER
        assert entry.count == 1

    def test_case_insensitive_class(self):
        assert UnitEntry.from_dict({"class": "wIzArD"}).character_class is CharacterClass.WIZARD

    def test_unknown_class(self):
        with pytest.raises(ValueError, match="Unknown character class 'paladin'"):
            UnitEntry.from_dict({"class": "paladin"})

    def test_missing_class(self):
        with pytest.raises(ValueError, match="missing 'class'"):
            UnitEntry.from_dict({"count": 2})

    @pytest.mark.parametrize("count", [0, -1, "two", True])
    def test_invalid_count(self, count):
        with pytest.raises(ValueError, match="positive integer"):
            UnitEntry.from_dict({"class": "WARRIOR", "count": count})

    def test_create_characters(self):
        characters = UnitEntry(CharacterClass.WARRIOR, 3).create_characters()
        assert characters == [Warrior(), Warrior(), Warrior()]


class TestArmyLoader:
    """Test ArmyLoader file and data parsing."""

    def test_load_from_file(self, roster_file):
        army = ArmyLoader.load_from_file(roster_file)

        assert army.name == "Test Roster"
        assert army.characters == [Warrior(), Warrior(), Wizard(), Archer()]
        assert len(army) == 4
        assert army[2] == Wizard()

    def test_default_name_from_file_stem(self, tmp_path):
        path = tmp_path / "skirmishers.yaml"
        path.write_text("units:\n  - class: ARCHER\n", encoding="utf-8")

        assert ArmyLoader.load_from_file(str(path)).name == "skirmishers"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Army roster file not found"):
            ArmyLoader.load_from_file(str(tmp_path / "nope.yaml"))

    def test_unparsable_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("units: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to parse YAML roster"):
            ArmyLoader.load_from_file(str(path))

    def test_invalid_structure_names_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("units:\n  - class: DRAGON\n", encoding="utf-8")

        with pytest.raises(ValueError, match="bad.yaml"):
            ArmyLoader.load_from_file(str(path))

    def test_parse_empty_units(self):
        army = ArmyLoader.parse({"name": "Nobody"})
        assert army.name == "Nobody"
        assert army.characters == []

    @pytest.mark.parametrize("data", [None, [], "units", {"units": "WARRIOR"}, {"units": ["WARRIOR"]}])
    def test_parse_rejects_bad_shapes(self, data):
        with pytest.raises(ValueError):
            ArmyLoader.parse(data)

    def test_bundled_default_roster(self):
        assert os.path.exists(DEFAULT_ARMY_PATH)

        army = ArmyLoader.load_from_file(DEFAULT_ARMY_PATH)
        assert army.characters == [Warrior(), Wizard(), Archer(), Warrior()]
