"""RTTTL header parsing.

An RTTTL melody has three colon-separated sections::

    name:d=4,o=5,b=120:8c,8d,e

This module splits a melody into those sections and turns the middle one
into validated ``Defaults``. Any problem here is fatal for the melody.
"""

import logging

from rtttl_beep.errors import (
    InvalidDefaultKeyError,
    InvalidDurationError,
    InvalidOctaveError,
    InvalidTempoError,
    MissingDefaultsError,
)
from rtttl_beep.models import Defaults
from rtttl_beep.pitch import MAX_OCTAVE, MIN_OCTAVE

logger = logging.getLogger(__name__)

MAX_DEFAULT_VALUE = 999
ASCII_DIGITS = "0123456789"
DURATION_CODES = (1, 2, 4, 8, 16, 32)
MIN_TEMPO_BPM = 40
MAX_TEMPO_BPM = 200


def split_melody(melody: str) -> tuple[str, str, str]:
    """Split a melody string into its name, defaults and notes sections.

    Args:
        melody: Full RTTTL string. The name before the first colon may be
            empty but the colon itself is required.

    Returns:
        Tuple of (name, defaults_section, notes_section). Colons after the
        second one stay in the notes section.

    Raises:
        MissingDefaultsError: If the melody has fewer than two colons.
    """
    parts = melody.split(":", 2)
    if len(parts) < 3:
        raise MissingDefaultsError("missing defaults section")
    name, defaults_section, notes_section = parts
    return name.strip(), defaults_section, notes_section


def _parse_value(raw: str) -> int | None:
    """Read the leading unsigned integer of a defaults value.

    Only ASCII digits count. Digits that would take the value past 999 are
    dropped, as is anything after the digit run.
    """
    value = None
    for char in raw.strip():
        if char not in ASCII_DIGITS:
            break
        candidate = (value or 0) * 10 + int(char)
        if candidate > MAX_DEFAULT_VALUE:
            break
        value = candidate
    return value


def _read_pairs(defaults_section: str) -> dict[str, int | None]:
    values: dict[str, int | None] = {}
    for pair in defaults_section.split(","):
        pair = pair.strip()
        if not pair:
            continue

        key, _, raw_value = pair.partition("=")
        key = key.strip()
        if len(key) != 1 or not "a" <= key <= "z":
            raise InvalidDefaultKeyError(f"invalid defaults key {key!r} in {pair!r}")

        value = _parse_value(raw_value)
        if key in values:
            logger.warning(
                f"Duplicate default '{key}={raw_value.strip()}' ignored, "
                f"keeping '{key}={values[key]}'"
            )
            continue
        values[key] = value
    return values


def parse_defaults(defaults_section: str) -> Defaults:
    """Parse and validate the defaults section of a melody.

    The section is a comma-separated list of ``key=value`` pairs such as
    ``d=4,o=5,b=120``, in any order and with optional whitespace around
    ``=`` and ``,``. Keys ``o`` (octave), ``d`` (duration code) and ``b``
    (tempo) are required; other single-letter keys are ignored.

    Args:
        defaults_section: Text between the first and second colon.

    Returns:
        Validated, immutable Defaults.

    Raises:
        InvalidDefaultKeyError: If a key is not a single letter a-z.
        InvalidOctaveError: If ``o`` is missing or outside 4-7.
        InvalidDurationError: If ``d`` is missing or not 1, 2, 4, 8, 16 or 32.
        InvalidTempoError: If ``b`` is missing or outside 40-200.
    """
    values = _read_pairs(defaults_section)

    for key in sorted(set(values) - {"o", "d", "b"}):
        logger.debug(f"Ignoring unknown default '{key}={values[key]}'")

    octave = values.get("o")
    if octave is None or not MIN_OCTAVE <= octave <= MAX_OCTAVE:
        raise InvalidOctaveError(octave)

    duration_code = values.get("d")
    if duration_code not in DURATION_CODES:
        raise InvalidDurationError(duration_code)

    tempo_bpm = values.get("b")
    if tempo_bpm is None or not MIN_TEMPO_BPM <= tempo_bpm <= MAX_TEMPO_BPM:
        raise InvalidTempoError(tempo_bpm)

    return Defaults(octave=octave, duration_code=duration_code, tempo_bpm=tempo_bpm)


def parse_header(melody: str) -> tuple[str, Defaults, str]:
    """Split a melody and parse its defaults.

    Args:
        melody: Full RTTTL string.

    Returns:
        Tuple of (name, defaults, notes_section).

    Raises:
        HeaderError: For any structural or defaults problem.
    """
    name, defaults_section, notes_section = split_melody(melody)
    return name, parse_defaults(defaults_section), notes_section
