import logging
import os

import pytest

from rtttl_beep.errors import (
    InvalidOctaveError,
    MissingDefaultsError,
    TokenTooLongError,
)
from rtttl_beep.models import PlayerParams, ToneEvent
from rtttl_beep.player import decode_melody, decode_tokens, iter_tone_events, play
from rtttl_beep.sinks import INPUT_EVENT, SND_TONE


def test_play_emits_in_order_and_skips_bad_notes(
    recording_sink, sleeps, simple_melody, caplog
):
    with caplog.at_level(logging.WARNING, logger="rtttl_beep.player"):
        result = play(recording_sink, simple_melody, sleep=sleeps.append)

    assert recording_sink.events == [
        ToneEvent(frequency_hz=523, duration_us=500000),
        ToneEvent(frequency_hz=587, duration_us=500000),
        ToneEvent(frequency_hz=0, duration_us=250000),
    ]
    assert result.name == "simple"
    assert result.played == 3
    assert result.skipped == 1
    assert "Note 1 ('3c') skipped" in caplog.text


def test_play_waits_a_quarter_of_each_note(recording_sink, sleeps, simple_melody):
    play(recording_sink, simple_melody, sleep=sleeps.append)
    assert sleeps == [
        pytest.approx(0.125),
        pytest.approx(0.125),
        pytest.approx(0.0625),
    ]


def test_play_gap_ratio_zero_never_sleeps(recording_sink, sleeps, simple_melody):
    play(
        recording_sink, simple_melody, PlayerParams(gap_ratio=0.0), sleep=sleeps.append
    )
    assert sleeps == []
    assert len(recording_sink.events) == 3


def test_play_fatal_header_emits_nothing(recording_sink, sleeps):
    with pytest.raises(InvalidOctaveError, match="octave"):
        play(recording_sink, "t:d=4,b=120:c,d,e", sleep=sleeps.append)
    assert recording_sink.events == []
    assert sleeps == []


def test_play_missing_defaults(recording_sink):
    with pytest.raises(MissingDefaultsError):
        play(recording_sink, "c,d,e")


def test_play_token_too_long_stops_melody(recording_sink, sleeps):
    melody = "t:d=4,o=5,b=120:c," + "c" * 32 + ",d"
    with pytest.raises(TokenTooLongError) as exc_info:
        play(recording_sink, melody, sleep=sleeps.append)
    assert exc_info.value.kind == "token-too-long"
    # only the note before the oversized token was played
    assert len(recording_sink.events) == 1


def test_play_token_at_limit_is_decoded(recording_sink, sleeps):
    # 31 characters: a valid note is never that long, so it is a note error
    melody = "t:d=4,o=5,b=120:" + "c" * 31 + ",d"
    result = play(recording_sink, melody, sleep=sleeps.append)
    assert result.skipped == 1
    assert result.played == 1


def test_play_ignores_blank_tokens(recording_sink, sleeps):
    result = play(recording_sink, "t:d=4,o=5,b=120: c, ,d,", sleep=sleeps.append)
    assert result.played == 2
    assert result.skipped == 0


def test_play_empty_note_list(recording_sink):
    result = play(recording_sink, "t:d=4,o=5,b=120:")
    assert result.played == 0
    assert recording_sink.events == []


def test_play_to_file_descriptor(sleeps):
    read_fd, write_fd = os.pipe()
    try:
        result = play(write_fd, "t:d=4,o=5,b=120:a", sleep=sleeps.append)
        data = os.read(read_fd, 4 * INPUT_EVENT.size)
    finally:
        os.close(read_fd)
        os.close(write_fd)

    assert result.played == 1
    values = [
        INPUT_EVENT.unpack_from(data, offset)[3:]
        for offset in range(0, len(data), INPUT_EVENT.size)
    ]
    assert values == [(SND_TONE, 440), (SND_TONE, 0)]
    # tone held for the note, then the inter-note gap
    assert sleeps == [pytest.approx(0.5), pytest.approx(0.125)]


def test_decode_tokens_reports_skipped(defaults):
    decoded = list(decode_tokens("c,x,,d", defaults))
    assert [(index, token) for index, token, _ in decoded] == [
        (0, "c"),
        (1, "x"),
        (3, "d"),
    ]
    assert decoded[1][2] is None


def test_iter_tone_events():
    events = list(iter_tone_events("t:d=8,o=6,b=120:c,p,3c"))
    assert events == [
        ToneEvent(frequency_hz=1047, duration_us=250000),
        ToneEvent(frequency_hz=0, duration_us=250000),
    ]


def test_iter_tone_events_is_lazy():
    events = iter_tone_events("no header")
    with pytest.raises(MissingDefaultsError):
        next(events)


def test_decode_melody(simple_melody):
    melody = decode_melody(simple_melody)
    assert melody.name == "simple"
    assert melody.defaults.tempo_bpm == 120
    assert len(melody.events) == 3
    assert melody.skipped == 1
    assert melody.total_duration_us == 1250000


def test_decode_melody_matches_playback(recording_sink, simple_melody):
    play(recording_sink, simple_melody, PlayerParams(gap_ratio=0.0))
    assert decode_melody(simple_melody).events == recording_sink.events
