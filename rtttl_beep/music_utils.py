"""Pitch naming helpers built on music21.

Tone events only carry a frequency. These helpers map a frequency to the
nearest equal-tempered MIDI note and its name, for the MIDI export and
for human-readable event listings.
"""

import music21

from rtttl_beep.pitch import SEMITONE_NAMES


def frequency_to_midi(frequency_hz: float) -> int:
    """Convert a frequency to the nearest MIDI note number.

    Args:
        frequency_hz: Tone frequency in Hz (positive).

    Returns:
        MIDI note number (e.g. 72 for 523 Hz), clamped to 0-127.

    Raises:
        ValueError: If ``frequency_hz`` is not positive.
    """
    if frequency_hz <= 0:
        raise ValueError(f"frequency must be positive, got {frequency_hz}")
    p = music21.pitch.Pitch()
    p.frequency = frequency_hz
    return max(0, min(127, round(p.ps)))


def get_key_name(frequency_hz: float) -> str:
    """Name the note closest to a frequency (e.g. "C5", "A#4").

    Accidentals are always spelled as sharps, matching RTTTL note tokens.

    Args:
        frequency_hz: Tone frequency in Hz. Zero names a rest.

    Returns:
        The pitch name with octave, or "rest" for a zero frequency.
    """
    if frequency_hz == 0:
        return "rest"
    midi = frequency_to_midi(frequency_hz)
    octave = midi // 12 - 1
    return f"{SEMITONE_NAMES[midi % 12]}{octave}"
