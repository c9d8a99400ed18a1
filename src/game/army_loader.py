"""Army roster loading from YAML files.

A roster names an army and lists its characters by class:

    name: Vanguard
    description: Two warriors up front
    units:
      - class: WARRIOR
        count: 2
      - class: wizard

Class names are matched case-insensitively; ``count`` defaults to 1.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..core.data import CharacterClass
from .entities.character import Character, create_character

DEFAULT_ARMY_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "assets", "data", "armies", "default_army.yaml",
)


@dataclass
class UnitEntry:
    """One line of a roster: a character class and how many of it."""

    character_class: CharacterClass
    count: int = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UnitEntry":
        """Create an entry from YAML data."""
        if "class" not in data:
            raise ValueError(f"Unit entry is missing 'class': {data}")

        class_name = str(data["class"]).strip().upper()
        try:
            character_class = CharacterClass[class_name]
        except KeyError:
            valid = ", ".join(c.name for c in CharacterClass)
            raise ValueError(f"Unknown character class '{data['class']}' (expected one of: {valid})")

        count = data.get("count", 1)
        if not isinstance(count, int) or isinstance(count, bool) or count < 1:
            raise ValueError(f"Unit count must be a positive integer, got {count!r}")

        return cls(character_class=character_class, count=count)

    def create_characters(self) -> list[Character]:
        return [create_character(self.character_class) for _ in range(self.count)]


@dataclass
class Army:
    """A named, ordered selection of characters."""

    name: str
    description: str = ""
    characters: list[Character] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.characters)

    def __getitem__(self, index: int) -> Character:
        return self.characters[index]


class ArmyLoader:
    """Handles loading army rosters from YAML files."""

    @staticmethod
    def load_from_file(file_path: str) -> Army:
        """Load an army from a YAML roster file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file cannot be parsed or has an invalid structure
        """
        path_obj = Path(file_path)

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Army roster file not found: {file_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML roster {path_obj.name}: {e}")

        try:
            return ArmyLoader.parse(data, default_name=path_obj.stem)
        except ValueError as e:
            raise ValueError(f"Invalid army roster in {file_path}: {e}")

    @staticmethod
    def parse(data: Any, default_name: str = "Unnamed Army") -> Army:
        """Parse an army from already-loaded roster data."""
        if not isinstance(data, dict):
            raise ValueError("Roster must be a mapping with a 'units' list")

        units = data.get("units", [])
        if not isinstance(units, list):
            raise ValueError("'units' must be a list")

        army = Army(
            name=data.get("name", default_name),
            description=data.get("description", ""),
        )

        for unit_data in units:
            if not isinstance(unit_data, dict):
                raise ValueError(f"Unit entry must be a mapping, got {unit_data!r}")
            army.characters.extend(UnitEntry.from_dict(unit_data).create_characters())

        return army
