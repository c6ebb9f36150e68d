"""Melody playback.

The player decodes a melody one note at a time and hands each tone event
to a sink as soon as it is decoded, pausing briefly between notes. Header
errors abort the melody before anything is emitted; a malformed note is
logged and skipped so the rest of the melody still plays.
"""

import logging
import time
from collections.abc import Callable, Iterator

from rtttl_beep.errors import NoteError, TokenTooLongError
from rtttl_beep.header import parse_header
from rtttl_beep.models import Defaults, Melody, PlaybackResult, PlayerParams, ToneEvent
from rtttl_beep.notes import decode_note
from rtttl_beep.sinks import EvdevToneSink, ToneSink

logger = logging.getLogger(__name__)

US_PER_SECOND = 1_000_000


def decode_tokens(
    notes_section: str, defaults: Defaults, max_token_length: int = 31
) -> Iterator[tuple[int, str, ToneEvent | None]]:
    """Decode a notes section lazily, token by token.

    Blank tokens are ignored. Tokens that fail to decode are logged and
    yielded with ``None`` in place of an event.

    Args:
        notes_section: Comma-separated note tokens.
        defaults: Validated melody defaults.
        max_token_length: Longest accepted token in characters.

    Yields:
        Tuples of (index, token, event_or_None).

    Raises:
        TokenTooLongError: If a token is longer than ``max_token_length``.
    """
    for index, raw_token in enumerate(notes_section.split(",")):
        token = raw_token.strip()
        if not token:
            continue
        if len(token) > max_token_length:
            raise TokenTooLongError(
                f"note {index} is longer than {max_token_length} characters"
            )

        try:
            event = decode_note(token, defaults, index)
        except NoteError as e:
            logger.warning(f"Note {index} ({token!r}) skipped: {e}")
            event = None
        yield index, token, event


def iter_tone_events(
    melody: str, params: PlayerParams | None = None
) -> Iterator[ToneEvent]:
    """Yield the tone events of a melody in playback order.

    The header is parsed before the first event is produced, so a fatal
    header error is raised on the first ``next()``.
    """
    params = params or PlayerParams()
    _, defaults, notes_section = parse_header(melody)
    for _, _, event in decode_tokens(notes_section, defaults, params.max_token_length):
        if event is not None:
            yield event


def decode_melody(melody: str, params: PlayerParams | None = None) -> Melody:
    """Decode a whole melody into a Melody model.

    Args:
        melody: Full RTTTL string.
        params: Player parameters (only the token length limit is used).

    Returns:
        Melody with the name, the defaults, every decoded event and the
        number of skipped tokens.

    Raises:
        HeaderError: If the header is malformed or a token is too long.
    """
    params = params or PlayerParams()
    name, defaults, notes_section = parse_header(melody)

    events: list[ToneEvent] = []
    skipped = 0
    for _, _, event in decode_tokens(notes_section, defaults, params.max_token_length):
        if event is None:
            skipped += 1
        else:
            events.append(event)

    return Melody(name=name, defaults=defaults, events=events, skipped=skipped)


def play(
    fd_or_sink: int | ToneSink,
    melody: str,
    params: PlayerParams | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> PlaybackResult:
    """Play a melody on a tone sink.

    Each decoded note is emitted immediately, then the player blocks for
    ``gap_ratio`` of the note's duration (a quarter by default) before
    decoding the next token.

    Args:
        fd_or_sink: A tone sink, or an open file descriptor of a beeper
            input-event device.
        melody: Full RTTTL string.
        params: Player parameters.
        sleep: Blocking wait in seconds, replaceable for tests.

    Returns:
        PlaybackResult with the number of played and skipped notes.

    Raises:
        HeaderError: If the header is malformed or a token is too long.
            Events emitted before an oversized token are not undone.
        SinkError: If the sink cannot write to its device.
    """
    params = params or PlayerParams()
    if isinstance(fd_or_sink, int):
        sink = EvdevToneSink(fd_or_sink, sleep=sleep)
    else:
        sink = fd_or_sink

    name, defaults, notes_section = parse_header(melody)
    logger.info(
        f"Playing '{name}' (o={defaults.octave}, d={defaults.duration_code}, "
        f"b={defaults.tempo_bpm})"
    )

    played = 0
    skipped = 0
    for index, token, event in decode_tokens(
        notes_section, defaults, params.max_token_length
    ):
        if event is None:
            skipped += 1
            continue

        logger.debug(
            f"Note {index} ({token!r}): {event.frequency_hz} Hz for {event.duration_us} us"
        )
        sink.emit(event.frequency_hz, event.duration_us)
        played += 1

        gap_us = int(event.duration_us * params.gap_ratio)
        if gap_us:
            sleep(gap_us / US_PER_SECOND)

    logger.info(f"Finished '{name}': {played} notes played, {skipped} skipped")
    return PlaybackResult(name=name, defaults=defaults, played=played, skipped=skipped)
