"""Request pipeline — semitone resolution, transposition and reformatting."""

from __future__ import annotations

import logging

from swara_transposer.config import get_settings
from swara_transposer.schemas import TranspositionRequest, TranspositionResult
from swara_transposer.transpose.engine import calculate_semitone_difference_western
from swara_transposer.transpose.reformat import reformat
from swara_transposer.transpose.sequence import tokenize, transpose_tokens

logger = logging.getLogger(__name__)


def resolve_semitones(request: TranspositionRequest) -> int:
    """Return the offset to apply, deriving it from the scale pair if given.

    Raises:
        InvalidScaleRoot: If a scale root does not resolve.
    """
    if request.semitones is not None:
        return request.semitones
    return calculate_semitone_difference_western(request.from_scale, request.to_scale)


def swap_scales(request: TranspositionRequest) -> TranspositionRequest:
    """Return a copy of a scale request with the two roots exchanged."""
    return request.model_copy(
        update={"from_scale": request.to_scale, "to_scale": request.from_scale}
    )


def transpose_text(request: TranspositionRequest) -> TranspositionResult:
    """Transpose the request's notes and rebuild them in the original layout.

    With punctuation preservation off, tokens are the whitespace-separated
    words of the input, so each word maps to exactly one output token and a
    word with an attached comma is left as typed. With it on, commas
    separate tokens and are kept in the reformatted text.
    """
    semitones = resolve_semitones(request)
    preserve = request.preserve_punctuation
    if preserve is None:
        preserve = get_settings().preserve_punctuation

    tokens = tokenize(request.notes) if preserve else request.notes.split()
    logger.debug(
        "Transposing %d tokens by %d semitones (western=%s)",
        len(tokens), semitones, request.use_western,
    )

    outcomes = transpose_tokens(tokens, semitones, request.use_western)
    transposed = [o.text for o in outcomes]
    unresolved = [o.token for o in outcomes if not o.ok]
    if unresolved:
        logger.info("%d of %d tokens left untransposed", len(unresolved), len(tokens))

    return TranspositionResult(
        type=request.type,
        original=tokens,
        transposed=transposed,
        transposed_formatted=reformat(
            request.notes, transposed, preserve_punctuation=preserve
        ),
        semitones=semitones,
        from_scale=request.from_scale,
        to_scale=request.to_scale,
        unresolved=unresolved,
    )
