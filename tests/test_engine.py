"""Tests for the transposition engine."""

import pytest

from swara_transposer.errors import InvalidScaleRoot, UnknownNote
from swara_transposer.notation import get_available_notes, get_available_western_notes
from swara_transposer.transpose.engine import (
    calculate_semitone_difference_western,
    semitone_delta_for_scale_change,
    transpose_index,
    transpose_note,
    try_transpose_note,
)


class TestTransposeIndex:
    def test_positive(self):
        assert transpose_index(0, 7) == 7

    def test_wraps_upward(self):
        assert transpose_index(11, 1) == 0

    def test_negative(self):
        assert transpose_index(0, -1) == 11

    @pytest.mark.parametrize("semitones", [-1000, -13, -12, 0, 12, 25, 1000])
    def test_always_in_range(self, semitones):
        for index in range(12):
            assert 0 <= transpose_index(index, semitones) <= 11

    def test_large_negative(self):
        # -1000 = -84 * 12 + 8
        assert transpose_index(0, -1000) == 8


class TestTransposeNote:
    def test_zero_is_identity(self):
        for note in get_available_notes():
            assert transpose_note(note, 0) == note
        for note in get_available_western_notes():
            assert transpose_note(note, 0, use_western=True) == note

    def test_octave_wraps_to_same_note(self):
        assert transpose_note("S", 12) == "S"

    def test_down_one_from_sa(self):
        assert transpose_note("S", -1) == "N"

    def test_large_negative_western(self):
        assert transpose_note("C", -13, use_western=True) == "B"

    def test_sharp_output(self):
        assert transpose_note("C", 1, use_western=True) == "C#"

    def test_alias_input_gives_canonical_output(self):
        assert transpose_note("Eb", 2, use_western=True) == "F"
        assert transpose_note("Db", 0, use_western=True) == "C#"

    def test_hindustani_komal_steps(self):
        assert transpose_note("S", 1) == "r"
        assert transpose_note("P", 3) == "n"

    def test_unknown_note_propagates(self):
        with pytest.raises(UnknownNote):
            transpose_note("X", 1)

    def test_notation_flag_selects_table(self):
        with pytest.raises(UnknownNote):
            transpose_note("S", 1, use_western=True)

    @pytest.mark.parametrize("semitones", [True, 1.0, "1", None])
    def test_rejects_non_integer_offset(self, semitones):
        with pytest.raises(TypeError):
            transpose_note("S", semitones)

    def test_try_variant_does_not_swallow_bad_offset(self):
        with pytest.raises(TypeError):
            try_transpose_note("S", False)


class TestTryTransposeNote:
    def test_success(self):
        outcome = try_transpose_note("R", 1)
        assert outcome.ok
        assert outcome.note == "g"
        assert outcome.text == "g"

    def test_failure_keeps_token(self):
        outcome = try_transpose_note("X", 1)
        assert not outcome.ok
        assert outcome.note is None
        assert isinstance(outcome.error, UnknownNote)
        assert outcome.text == "X"


class TestScaleDelta:
    def test_c_to_g(self):
        assert calculate_semitone_difference_western("C", "G") == 7

    def test_g_to_c_is_negative(self):
        assert calculate_semitone_difference_western("G", "C") == -7

    def test_alias_root(self):
        assert calculate_semitone_difference_western("C", "Db") == 1

    def test_not_wrapped(self):
        assert calculate_semitone_difference_western("C", "B") == 11
        assert calculate_semitone_difference_western("B", "C") == -11

    def test_same_root(self):
        assert calculate_semitone_difference_western("F#", "Gb") == 0

    def test_antisymmetric(self):
        notes = get_available_western_notes()
        for a in notes:
            for b in notes:
                assert calculate_semitone_difference_western(a, b) == (
                    -calculate_semitone_difference_western(b, a)
                )

    def test_plus_11_and_minus_1_agree_per_note(self):
        for note in get_available_western_notes():
            assert transpose_note(note, 11, True) == transpose_note(note, -1, True)

    def test_invalid_from_root(self):
        with pytest.raises(InvalidScaleRoot) as info:
            calculate_semitone_difference_western("H", "C")
        assert info.value.token == "H"
        assert isinstance(info.value.__cause__, UnknownNote)

    def test_invalid_to_root(self):
        with pytest.raises(InvalidScaleRoot):
            calculate_semitone_difference_western("C", "S")

    def test_invalid_root_is_unknown_note(self):
        with pytest.raises(UnknownNote):
            calculate_semitone_difference_western("C", "")

    def test_alias_name(self):
        assert semitone_delta_for_scale_change is calculate_semitone_difference_western
