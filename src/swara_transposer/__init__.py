"""Swara Transposer — transpose Hindustani and Western note sequences."""

from swara_transposer.errors import InvalidScaleRoot, TransposerError, UnknownNote
from swara_transposer.notation import (
    Notation,
    NoteCycle,
    get_available_notes,
    get_available_western_notes,
    get_note_choices,
    resolve_hindustani,
    resolve_western,
)
from swara_transposer.schemas import (
    HistoryEntry,
    TranspositionRequest,
    TranspositionResult,
    TranspositionType,
)
from swara_transposer.transpose import (
    NoteOutcome,
    calculate_semitone_difference_western,
    reformat,
    semitone_delta_for_scale_change,
    swap_scales,
    tokenize,
    transpose_index,
    transpose_note,
    transpose_sequence,
    transpose_text,
    transpose_tokens,
    try_transpose_note,
)

__version__ = "0.1.0"

__all__ = [
    "HistoryEntry",
    "InvalidScaleRoot",
    "Notation",
    "NoteCycle",
    "NoteOutcome",
    "TranspositionRequest",
    "TranspositionResult",
    "TranspositionType",
    "TransposerError",
    "UnknownNote",
    "calculate_semitone_difference_western",
    "get_available_notes",
    "get_available_western_notes",
    "get_note_choices",
    "reformat",
    "resolve_hindustani",
    "resolve_western",
    "semitone_delta_for_scale_change",
    "swap_scales",
    "tokenize",
    "transpose_index",
    "transpose_note",
    "transpose_sequence",
    "transpose_text",
    "transpose_tokens",
    "try_transpose_note",
]
