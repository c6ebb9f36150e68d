import pytest

from rtttl_beep.pitch import (
    PITCH_TABLE,
    SEMITONE_NAMES,
    note_frequency,
    semitone_column,
)


def test_pitch_table_shape() -> None:
    assert sorted(PITCH_TABLE) == [4, 5, 6, 7]
    assert all(len(row) == len(SEMITONE_NAMES) == 12 for row in PITCH_TABLE.values())


def test_pitch_table_rows_double_per_octave() -> None:
    for octave in (4, 5, 6):
        for low, high in zip(PITCH_TABLE[octave], PITCH_TABLE[octave + 1]):
            assert high == pytest.approx(2 * low, abs=2)


def test_pitch_table_is_a_anchored() -> None:
    row = PITCH_TABLE[5]
    assert row[SEMITONE_NAMES.index("A")] == 440
    assert row[SEMITONE_NAMES.index("C")] == 523
    # A, A# and B sit below C in every row
    for values in PITCH_TABLE.values():
        assert values[9] < values[10] < values[11] < values[0]


@pytest.mark.parametrize(
    "letter, sharp, column",
    [("c", False, 0), ("c", True, 1), ("a", False, 9), ("A", True, 10), ("g", True, 8)],
)
def test_semitone_column(letter, sharp, column) -> None:
    assert semitone_column(letter, sharp) == column


@pytest.mark.parametrize("letter", ["b", "e"])
def test_b_and_e_sharp_keep_their_column(letter) -> None:
    assert semitone_column(letter, True) == semitone_column(letter, False)


@pytest.mark.parametrize(
    "letter, octave, sharp, freq",
    [
        ("c", 5, False, 523),
        ("a", 5, True, 466),
        ("d", 5, False, 587),
        ("g", 4, True, 415),
        ("a", 6, False, 880),
        ("b", 7, False, 1976),
    ],
)
def test_note_frequency(letter, octave, sharp, freq) -> None:
    assert note_frequency(letter, octave, sharp) == freq


def test_pause_is_silent_regardless_of_octave() -> None:
    assert note_frequency("p", 5) == 0
    assert note_frequency("P", 9, sharp=True) == 0


def test_unknown_letter_raises() -> None:
    with pytest.raises(KeyError):
        note_frequency("h", 5)
