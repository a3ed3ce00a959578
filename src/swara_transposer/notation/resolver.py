"""Note resolution: map a raw token to its index in a chromatic cycle."""

from __future__ import annotations

from swara_transposer.errors import UnknownNote
from swara_transposer.notation.tables import HINDUSTANI, WESTERN, NoteCycle


def resolve_note(raw: str, cycle: NoteCycle) -> int:
    """Resolve a raw token against a cycle.

    Surrounding whitespace is stripped. The token must then match a
    canonical name or an alias key exactly; there is no case folding.

    Args:
        raw: Token as typed by the user.
        cycle: The cycle to resolve against.

    Returns:
        Index in [0, 11].

    Raises:
        TypeError: If ``raw`` is not a string.
        UnknownNote: If the token matches neither a name nor an alias.
    """
    if not isinstance(raw, str):
        raise TypeError(f"Note must be a string, got {type(raw).__name__}")

    token = raw.strip()
    if token in cycle.notes:
        return cycle.notes.index(token)
    if token in cycle.aliases:
        return cycle.notes.index(cycle.aliases[token])
    raise UnknownNote(raw, cycle.notation.value)


def resolve_hindustani(raw: str) -> int:
    return resolve_note(raw, HINDUSTANI)


def resolve_western(raw: str) -> int:
    return resolve_note(raw, WESTERN)
