"""Tone sinks: where decoded tone events end up.

A sink is anything with an ``emit(frequency_hz, duration_us)`` method that
holds the tone for the given duration and then silences it. A frequency of
zero means stay silent for the duration.

- ``EvdevToneSink`` drives a PC speaker or buzzer exposed by the Linux
  input subsystem (``/dev/input/eventN``) with ``EV_SND`` events.
- ``RecordingSink`` keeps the events in memory without waiting.
- ``MidiFileSink`` collects the events into a single-track MIDI file.
"""

import io
import logging
import os
import struct
import time
from collections.abc import Callable
from typing import Protocol

import mido
from mido import Message, MetaMessage, MidiFile, MidiTrack

from rtttl_beep.errors import SinkError
from rtttl_beep.models import DeviceParams, ToneEvent
from rtttl_beep.music_utils import frequency_to_midi

logger = logging.getLogger(__name__)

# struct input_event from <linux/input.h>: struct timeval, __u16 type,
# __u16 code, __s32 value. The kernel fills in the timestamp.
INPUT_EVENT = struct.Struct("llHHi")
EV_SND = 0x12
SND_BELL = 0x01
SND_TONE = 0x02

US_PER_SECOND = 1_000_000


class ToneSink(Protocol):
    """Holds a tone for ``duration_us`` and then silences it; 0 Hz is a silent wait."""

    def emit(self, frequency_hz: int, duration_us: int) -> None: ...


class EvdevToneSink:
    """Tone sink writing sound events to a Linux input-event device.

    Attributes:
        fd: Open, writable file descriptor of the event device.
        owns_fd: Whether ``close()`` should close ``fd``.
    """

    def __init__(
        self,
        fd: int,
        sleep: Callable[[float], None] = time.sleep,
        owns_fd: bool = False,
    ):
        self.fd = fd
        self.owns_fd = owns_fd
        self._sleep = sleep

    @classmethod
    def open(
        cls,
        device: DeviceParams | str | int = 0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "EvdevToneSink":
        """Open a beeper device for writing.

        Args:
            device: Device parameters, an explicit device path, or the
                event number N of ``/dev/input/eventN``.
            sleep: Blocking wait in seconds, replaceable for tests.

        Returns:
            A sink that closes the device when closed.

        Raises:
            SinkError: If the device cannot be opened.
        """
        if isinstance(device, int):
            device = DeviceParams(event_number=device)
        path = device.path if isinstance(device, DeviceParams) else device

        try:
            fd = os.open(path, os.O_WRONLY)
        except OSError as e:
            raise SinkError(
                f'Failed to open event device "{path}": {e.strerror}'
            ) from e

        logger.debug(f"Opened event device {path} (fd {fd})")
        return cls(fd, sleep=sleep, owns_fd=True)

    def _send(self, code: int, value: int) -> None:
        data = INPUT_EVENT.pack(0, 0, EV_SND, code, value)
        try:
            written = os.write(self.fd, data)
        except OSError as e:
            logger.error(f"Failed to write sound event to fd {self.fd}: {e}")
            raise SinkError(f"failed to write sound event: {e.strerror}") from e
        if written != len(data):
            logger.error(f"Short write to fd {self.fd}: {written}/{len(data)} bytes")
            raise SinkError(f"short write: {written} of {len(data)} bytes")

    def _hold(self, code: int, value: int, duration_us: int) -> None:
        self._send(code, value)
        try:
            self._sleep(duration_us / US_PER_SECOND)
        finally:
            self._send(code, 0)

    def emit(self, frequency_hz: int, duration_us: int) -> None:
        """Sound a tone for ``duration_us`` microseconds, then silence it."""
        self._hold(SND_TONE, frequency_hz, duration_us)

    def bell(self, duration_us: int) -> None:
        """Ring the device's bell sound instead of a tone."""
        self._hold(SND_BELL, 1, duration_us)

    def close(self) -> None:
        if self.owns_fd and self.fd >= 0:
            os.close(self.fd)
            logger.debug(f"Closed event device fd {self.fd}")
            self.fd = -1

    def __enter__(self) -> "EvdevToneSink":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class RecordingSink:
    """Tone sink that keeps every emitted event and returns immediately."""

    def __init__(self):
        self.events: list[ToneEvent] = []

    def emit(self, frequency_hz: int, duration_us: int) -> None:
        self.events.append(
            ToneEvent(frequency_hz=frequency_hz, duration_us=duration_us)
        )


class MidiFileSink:
    """Tone sink that writes the emitted melody as a MIDI file.

    Tones become note_on/note_off pairs on a single track; rests and
    ``advance()`` calls become delta time before the next note. Passing
    ``advance`` as the player's sleep function keeps the inter-note gaps.

    Attributes:
        tempo_bpm: Tempo written to the file and used for tick conversion.
        ticks_per_beat: MIDI ticks per quarter note.
        velocity: Velocity of every note.
    """

    def __init__(
        self, tempo_bpm: int = 120, ticks_per_beat: int = 480, velocity: int = 64
    ):
        self.tempo_bpm = tempo_bpm
        self.ticks_per_beat = ticks_per_beat
        self.velocity = velocity
        self._tempo = mido.bpm2tempo(tempo_bpm)
        self._messages: list[Message] = []
        self._pending_ticks = 0

    def _to_ticks(self, seconds: float) -> int:
        return int(round(mido.second2tick(seconds, self.ticks_per_beat, self._tempo)))

    def advance(self, seconds: float) -> None:
        """Add silence before the next note."""
        self._pending_ticks += self._to_ticks(seconds)

    def emit(self, frequency_hz: int, duration_us: int) -> None:
        ticks = self._to_ticks(duration_us / US_PER_SECOND)
        if frequency_hz == 0:
            self._pending_ticks += ticks
            return

        note = frequency_to_midi(frequency_hz)
        self._messages.append(
            Message(
                "note_on", note=note, velocity=self.velocity, time=self._pending_ticks
            )
        )
        self._messages.append(
            Message("note_off", note=note, velocity=self.velocity, time=ticks)
        )
        self._pending_ticks = 0

    def to_midi_file(self) -> MidiFile:
        midi_file = MidiFile(ticks_per_beat=self.ticks_per_beat)
        track = MidiTrack()
        midi_file.tracks.append(track)

        track.append(MetaMessage("set_tempo", tempo=self._tempo, time=0))
        track.extend(self._messages)
        # Trailing rests still count towards the length of the file
        track.append(MetaMessage("end_of_track", time=self._pending_ticks))
        return midi_file

    def to_bytes(self) -> bytes:
        """Serialize the collected melody as a standard MIDI file."""
        buffer = io.BytesIO()
        self.to_midi_file().save(file=buffer)
        buffer.seek(0)
        return buffer.getvalue()

    def save(self, path: str) -> None:
        with open(path, "wb") as f:
            f.write(self.to_bytes())
        logger.info(f"Wrote {len(self._messages) // 2} notes to {path}")
