import pytest
from rtttl_beep.models import Defaults, ToneEvent


@pytest.fixture
def valid_defaults():
    return Defaults(octave=6, duration_code=8, tempo_bpm=180)


@pytest.fixture
def valid_tone_event():
    return ToneEvent(frequency_hz=440, duration_us=500000)
