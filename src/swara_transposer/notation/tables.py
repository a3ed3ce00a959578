"""Notation tables — the two 12-note chromatic cycles and the Western aliases.

Hindustani letters follow the common sargam shorthand:
  - upper case S R G M P D N: Sa, shuddha Re/Ga/Dha/Ni, teevra Ma
  - lower case r g m d n: komal Re/Ga/Dha/Ni, shuddha Ma
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

CYCLE_LENGTH = 12


class Notation(StrEnum):
    hindustani = "hindustani"
    western = "western"


@dataclass(frozen=True)
class NoteCycle:
    """An ordered ring of 12 canonical note names.

    Attributes:
        notation: Which notation system the names belong to.
        notes: Canonical names, index 0 is the tonic.
        aliases: Alternate spelling -> canonical name.
        labels: Display label per index (empty to use the names).
    """

    notation: Notation
    notes: tuple[str, ...]
    aliases: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    labels: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.notes) != CYCLE_LENGTH:
            raise ValueError(
                f"{self.notation} cycle has {len(self.notes)} notes, "
                f"expected {CYCLE_LENGTH}."
            )
        if len(set(self.notes)) != CYCLE_LENGTH:
            raise ValueError(f"{self.notation} cycle has duplicate notes.")
        for alias, target in self.aliases.items():
            if target not in self.notes:
                raise ValueError(
                    f"Alias {alias!r} points at {target!r}, "
                    f"which is not in the {self.notation} cycle."
                )
        if self.labels and len(self.labels) != CYCLE_LENGTH:
            raise ValueError(f"{self.notation} cycle needs one label per note.")

    def name_at(self, index: int) -> str:
        return self.notes[index % CYCLE_LENGTH]

    def label_at(self, index: int) -> str:
        if self.labels:
            return self.labels[index % CYCLE_LENGTH]
        return self.name_at(index)


HINDUSTANI = NoteCycle(
    notation=Notation.hindustani,
    notes=("S", "r", "R", "g", "G", "m", "M", "P", "d", "D", "n", "N"),
    labels=(
        "Sa", "Komal Re", "Shuddha Re", "Komal Ga", "Shuddha Ga",
        "Shuddha Ma", "Teevra Ma", "Pa", "Komal Dha", "Shuddha Dha",
        "Komal Ni", "Shuddha Ni",
    ),
)

# Flat spellings of the five black keys
WESTERN = NoteCycle(
    notation=Notation.western,
    notes=("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"),
    aliases=MappingProxyType({
        "Db": "C#",
        "Eb": "D#",
        "Gb": "F#",
        "Ab": "G#",
        "Bb": "A#",
    }),
)


def get_cycle(use_western: bool = False) -> NoteCycle:
    """Select the cycle for a notation flag."""
    return WESTERN if use_western else HINDUSTANI


def get_available_notes() -> list[str]:
    """Return the 12 Hindustani notes in cycle order (a fresh list)."""
    return list(HINDUSTANI.notes)


def get_available_western_notes() -> list[str]:
    """Return the 12 Western notes in cycle order (a fresh list)."""
    return list(WESTERN.notes)


def get_note_choices(use_western: bool = False) -> list[dict[str, str]]:
    """Return ``{"value", "label"}`` pairs for populating a note picker."""
    cycle = get_cycle(use_western)
    return [
        {"value": name, "label": cycle.label_at(i)}
        for i, name in enumerate(cycle.notes)
    ]
