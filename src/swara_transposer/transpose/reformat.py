"""Re-weave transposed tokens into the layout of the original text.

Every whitespace run and line break of the original is kept; only the
non-whitespace runs ("words") are substituted, left to right and top to
bottom, from a single cursor shared across all lines.

Punctuation policy:
  - default: a word such as "S," is replaced wholesale, dropping the comma
  - preserve_punctuation: commas inside a word are kept and every
    comma-separated piece takes its own token, matching ``tokenize``
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

_WHITESPACE_SPLIT = re.compile(r"(\s+)")
_COMMA_SPLIT = re.compile(r"(,+)")


def _is_word(segment: str) -> bool:
    return bool(segment.strip())


def _substitute(
    segments: list[str],
    tokens: Iterator[str],
    is_word,
) -> str:
    out = []
    for segment in segments:
        if is_word(segment):
            # Exhausted tokens leave the original word in place
            out.append(next(tokens, segment))
        else:
            out.append(segment)
    return "".join(out)


def _reformat_word(word: str, tokens: Iterator[str]) -> str:
    pieces = _COMMA_SPLIT.split(word)
    return _substitute(pieces, tokens, lambda p: bool(p) and not p.startswith(","))


def reformat(
    original_text: str,
    transposed_tokens: Sequence[str],
    preserve_punctuation: bool = False,
) -> str:
    """Substitute word positions in ``original_text`` with transposed tokens.

    Args:
        original_text: The text exactly as the user typed it.
        transposed_tokens: Replacement tokens in reading order.
        preserve_punctuation: Keep commas attached to words.

    Returns:
        The reconstructed text. Surplus tokens are ignored and missing
        tokens leave the remaining words unchanged.
    """
    tokens = iter(transposed_tokens)
    lines = []
    for line in original_text.split("\n"):
        segments = _WHITESPACE_SPLIT.split(line)
        if preserve_punctuation:
            lines.append("".join(
                _reformat_word(s, tokens) if _is_word(s) else s
                for s in segments
            ))
        else:
            lines.append(_substitute(segments, tokens, _is_word))
    return "\n".join(lines)
