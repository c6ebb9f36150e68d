import pytest

from rtttl_beep.music_utils import frequency_to_midi, get_key_name
from rtttl_beep.pitch import PITCH_TABLE


@pytest.mark.parametrize(
    "freq, midi", [(440, 69), (523, 72), (262, 60), (220, 57), (3951, 107)]
)
def test_frequency_to_midi(freq, midi) -> None:
    assert frequency_to_midi(freq) == midi


def test_pitch_table_maps_to_distinct_midi_notes() -> None:
    notes = {frequency_to_midi(f) for row in PITCH_TABLE.values() for f in row}
    assert len(notes) == 48


@pytest.mark.parametrize("freq", [0, -440])
def test_frequency_to_midi_rejects_non_positive(freq) -> None:
    with pytest.raises(ValueError):
        frequency_to_midi(freq)


def test_get_key_name() -> None:
    assert get_key_name(523) == "C5"
    assert get_key_name(440) == "A4"


def test_get_key_name_rest() -> None:
    assert get_key_name(0) == "rest"


@pytest.mark.parametrize(
    "freq, name", [(466, "A#4"), (554, "C#5"), (1480, "F#6"), (3322, "G#7")]
)
def test_get_key_name_spells_sharps(freq, name) -> None:
    assert get_key_name(freq) == name
