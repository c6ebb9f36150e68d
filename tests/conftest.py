import pytest

from rtttl_beep.models import Defaults
from rtttl_beep.sinks import RecordingSink


@pytest.fixture
def defaults():
    # o=5, d=4, b=120: whole note 2000 ms, quarter note 500000 us
    return Defaults(octave=5, duration_code=4, tempo_bpm=120)


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def sleeps():
    # Stand-in for time.sleep that records the requested waits
    return []


@pytest.fixture
def simple_melody():
    # Three valid notes around one malformed token
    return "simple:d=4,o=5,b=120:c,3c,d,8p"
