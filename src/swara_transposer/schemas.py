"""Pydantic models for transposition requests, results and history records."""

from __future__ import annotations

import json
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class TranspositionType(StrEnum):
    semitone = "semitone"
    scale = "scale"


def _join(notes: list[str]) -> str:
    return " ".join(notes)


# ---------------------------------------------------------------------------
# Request / result
# ---------------------------------------------------------------------------


class TranspositionRequest(BaseModel):
    """One transposition, either by offset or by scale change.

    Exactly one of ``semitones`` and the ``from_scale``/``to_scale`` pair
    must be given. ``preserve_punctuation`` left as None uses the
    configured default.
    """

    model_config = ConfigDict(frozen=True)

    notes: str
    semitones: int | None = None
    from_scale: str | None = None
    to_scale: str | None = None
    use_western: bool = False
    preserve_punctuation: bool | None = None

    @field_validator("notes")
    @classmethod
    def notes_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please enter notes to transpose.")
        return v

    @model_validator(mode="after")
    def one_source_of_semitones(self) -> TranspositionRequest:
        has_pair = self.from_scale is not None or self.to_scale is not None
        if has_pair and (not self.from_scale or not self.to_scale):
            raise ValueError("Please select both scales.")
        if has_pair and self.semitones is not None:
            raise ValueError("Give either semitones or a scale pair, not both.")
        if not has_pair and self.semitones is None:
            raise ValueError("Please enter semitones or select both scales.")
        return self

    @property
    def type(self) -> TranspositionType:
        if self.from_scale is not None:
            return TranspositionType.scale
        return TranspositionType.semitone


class TranspositionResult(BaseModel):
    """Output of ``transpose_text``."""

    type: TranspositionType
    original: list[str]
    transposed: list[str]
    transposed_formatted: str
    semitones: int
    from_scale: str | None = None
    to_scale: str | None = None
    unresolved: list[str] = []

    def to_history_entry(self, original_text: str) -> HistoryEntry:
        """Build the record handed to history persistence."""
        return HistoryEntry(
            type=self.type,
            original_notes=self.original,
            transposed_notes=self.transposed,
            original_formatted=original_text,
            transposed_formatted=self.transposed_formatted,
            semitones=self.semitones,
            from_scale=self.from_scale,
            to_scale=self.to_scale,
        )


# ---------------------------------------------------------------------------
# History records
# ---------------------------------------------------------------------------


class HistoryEntry(BaseModel):
    """A saved transposition, as exchanged with the history table."""

    type: TranspositionType
    original_notes: list[str]
    transposed_notes: list[str]
    original_formatted: str | None = None
    transposed_formatted: str | None = None
    semitones: int
    from_scale: str | None = None
    to_scale: str | None = None
    created_at: datetime | None = None

    @field_validator("original_notes", "transposed_notes", mode="before")
    @classmethod
    def parse_notes(cls, v):
        """Accept a list, a JSON-encoded list, or a space/comma separated string."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
            except json.JSONDecodeError:
                return v.replace(",", " ").split()
            if isinstance(parsed, list):
                return parsed
            return v.replace(",", " ").split()
        if v is None:
            return []
        return v

    def to_record(self) -> dict:
        """Flatten to a row dict; note lists are stored space-joined."""
        return {
            "type": self.type.value,
            "original_notes": _join(self.original_notes),
            "transposed_notes": _join(self.transposed_notes),
            "original_formatted": (
                self.original_formatted
                if self.original_formatted is not None
                else _join(self.original_notes)
            ),
            "transposed_formatted": (
                self.transposed_formatted
                if self.transposed_formatted is not None
                else _join(self.transposed_notes)
            ),
            "semitones": self.semitones,
            "from_scale": self.from_scale,
            "to_scale": self.to_scale,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_record(cls, row: dict) -> HistoryEntry:
        """Rebuild an entry from a row, ignoring storage-only columns."""
        fields = {k: v for k, v in row.items() if k in cls.model_fields}
        return cls.model_validate(fields)

    def export_lines(self) -> list[str]:
        """Paragraphs for document exporters (PDF, Word)."""
        lines = [
            "Transposed Notes",
            f"Original: {_join(self.original_notes)}",
            f"Transposed: {_join(self.transposed_notes)}",
            f"Semitones: {self.semitones}",
        ]
        if self.type == TranspositionType.scale and self.from_scale and self.to_scale:
            lines.append(f"Scale: {self.from_scale} → {self.to_scale}")
        return lines
