"""Notation tables and note resolution for Hindustani and Western names."""

from swara_transposer.notation.resolver import (
    resolve_hindustani,
    resolve_note,
    resolve_western,
)
from swara_transposer.notation.tables import (
    CYCLE_LENGTH,
    HINDUSTANI,
    WESTERN,
    Notation,
    NoteCycle,
    get_available_notes,
    get_available_western_notes,
    get_cycle,
    get_note_choices,
)

__all__ = [
    "CYCLE_LENGTH",
    "HINDUSTANI",
    "WESTERN",
    "Notation",
    "NoteCycle",
    "get_available_notes",
    "get_available_western_notes",
    "get_cycle",
    "get_note_choices",
    "resolve_hindustani",
    "resolve_note",
    "resolve_western",
]
