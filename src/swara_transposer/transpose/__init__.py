"""Transposition engine, sequence transposer and format-preserving reconstruction."""

from swara_transposer.transpose.engine import (
    NoteOutcome,
    calculate_semitone_difference_western,
    semitone_delta_for_scale_change,
    transpose_index,
    transpose_note,
    try_transpose_note,
)
from swara_transposer.transpose.pipeline import (
    resolve_semitones,
    swap_scales,
    transpose_text,
)
from swara_transposer.transpose.reformat import reformat
from swara_transposer.transpose.sequence import (
    tokenize,
    transpose_sequence,
    transpose_tokens,
)

__all__ = [
    "NoteOutcome",
    "calculate_semitone_difference_western",
    "reformat",
    "resolve_semitones",
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
