"""Shift notes around the 12-tone cycle and compute scale-change deltas."""

from __future__ import annotations

from dataclasses import dataclass

from swara_transposer.errors import InvalidScaleRoot, UnknownNote
from swara_transposer.notation.resolver import resolve_note, resolve_western
from swara_transposer.notation.tables import CYCLE_LENGTH, get_cycle


@dataclass(frozen=True)
class NoteOutcome:
    """Result of transposing a single token.

    Exactly one of ``note`` and ``error`` is set.

    Attributes:
        token: The token as supplied.
        note: Transposed note name on success.
        error: The resolution failure otherwise.
    """

    token: str
    note: str | None = None
    error: UnknownNote | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def text(self) -> str:
        """The transposed name, or the untouched token when resolution failed."""
        return self.note if self.note is not None else self.token


def check_semitones(semitones: int) -> None:
    """Raise TypeError unless the offset is a plain integer."""
    # bool is an int subclass but never a meaningful offset
    if isinstance(semitones, bool) or not isinstance(semitones, int):
        raise TypeError(
            f"Semitones must be an integer, got {type(semitones).__name__}"
        )


def transpose_index(index: int, semitones: int) -> int:
    """Shift a cycle index by a signed number of semitones.

    Python's ``%`` with a positive divisor is never negative, so offsets of
    any magnitude (e.g. -1000) land in [0, 11].
    """
    return (index + semitones) % CYCLE_LENGTH


def transpose_note(note: str, semitones: int, use_western: bool = False) -> str:
    """Transpose one note and return its name in the same notation.

    Raises:
        TypeError: If ``semitones`` is not an integer.
        UnknownNote: If the note does not resolve in the selected notation.
    """
    check_semitones(semitones)
    cycle = get_cycle(use_western)
    index = resolve_note(note, cycle)
    return cycle.name_at(transpose_index(index, semitones))


def try_transpose_note(
    note: str,
    semitones: int,
    use_western: bool = False,
) -> NoteOutcome:
    """Like ``transpose_note`` but reports an unknown note instead of raising."""
    try:
        return NoteOutcome(token=note, note=transpose_note(note, semitones, use_western))
    except UnknownNote as exc:
        return NoteOutcome(token=note, error=exc)


def calculate_semitone_difference_western(from_root: str, to_root: str) -> int:
    """Semitone delta implied by moving a scale from one Western root to another.

    The result is ``to_index - from_index`` in -11..+11 and is not wrapped,
    so C->G is +7 and G->C is -7. Transposition only models pitch class,
    which makes +11 and -1 equivalent once applied.

    Raises:
        InvalidScaleRoot: If either root is not a Western note or alias.
    """
    try:
        from_index = resolve_western(from_root)
        to_index = resolve_western(to_root)
    except UnknownNote as exc:
        raise InvalidScaleRoot(exc.token, exc.notation) from exc
    return to_index - from_index


semitone_delta_for_scale_change = calculate_semitone_difference_western
