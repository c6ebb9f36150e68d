from rtttl_beep.models import Melody, PlaybackResult, ToneEvent


def test_melody_defaults(valid_defaults):
    m = Melody(defaults=valid_defaults)
    assert m.name == ""
    assert m.events == []
    assert m.skipped == 0
    assert m.total_duration_us == 0


def test_melody_total_duration(valid_defaults, valid_tone_event):
    rest = ToneEvent(frequency_hz=0, duration_us=250000)
    m = Melody(name="x", defaults=valid_defaults, events=[valid_tone_event, rest])
    assert m.total_duration_us == 750000


def test_playbackresult_defaults(valid_defaults):
    r = PlaybackResult(defaults=valid_defaults)
    assert r.name == ""
    assert r.played == 0
    assert r.skipped == 0
    assert r.defaults.tempo_bpm == 180
