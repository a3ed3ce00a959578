"""Transpose every token of a note sequence."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from swara_transposer.config import get_settings
from swara_transposer.transpose.engine import (
    NoteOutcome,
    check_semitones,
    try_transpose_note,
)

logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """Split free-form input into note tokens.

    Commas count as whitespace; runs of whitespace separate tokens and
    empty fragments are dropped.
    """
    return text.replace(",", " ").split()


def _as_tokens(notes: str | Sequence[str]) -> list[str]:
    if isinstance(notes, str):
        return tokenize(notes)
    if not isinstance(notes, Sequence):
        raise TypeError(
            f"Notes must be a string or a sequence of strings, "
            f"got {type(notes).__name__}"
        )
    tokens = list(notes)
    for token in tokens:
        if not isinstance(token, str):
            raise TypeError(
                f"Every note must be a string, got {type(token).__name__}"
            )
    return tokens


def transpose_tokens(
    notes: str | Sequence[str],
    semitones: int,
    use_western: bool = False,
) -> list[NoteOutcome]:
    """Transpose each token and report a per-token outcome, in input order.

    Raises:
        TypeError: On a malformed call (wrong input or offset type).
    """
    tokens = _as_tokens(notes)
    check_semitones(semitones)

    warn = get_settings().warn_on_unknown_notes
    outcomes = []
    for token in tokens:
        outcome = try_transpose_note(token, semitones, use_western)
        if not outcome.ok and warn:
            logger.warning("Leaving note untransposed: %s", outcome.error)
        outcomes.append(outcome)
    return outcomes


def transpose_sequence(
    notes: str | Sequence[str],
    semitones: int,
    use_western: bool = False,
) -> list[str]:
    """Transpose a note sequence, passing unknown tokens through unchanged.

    Args:
        notes: A free-form string (see ``tokenize``) or pre-split tokens.
        semitones: Signed offset, any magnitude.
        use_western: Resolve against the Western cycle instead of Hindustani.

    Returns:
        One entry per input token: the transposed name, or the original
        token when it does not resolve.
    """
    return [o.text for o in transpose_tokens(notes, semitones, use_western)]
