"""Decoding of individual RTTTL note tokens.

A note token has the shape ``[duration]letter[#][.][octave]``, for
example ``8c#.6`` or ``p``. Tokens are read left to right with a small
forward-only cursor, each optional part being consumed in that order.
"""

from rtttl_beep.errors import (
    InvalidNoteDurationError,
    InvalidNoteLetterError,
    InvalidNoteOctaveError,
)
from rtttl_beep.models import Defaults, ToneEvent
from rtttl_beep.pitch import NOTE_LETTERS, note_frequency

OCTAVE_DIGITS = ("4", "5", "6", "7")
SHARP_MARKER = "#"
DOT_MARKER = "."


class TokenCursor:
    """Forward-only reader over the characters of a note token."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        """Return the next character without consuming it, or "" at the end."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def take(self) -> str:
        char = self.peek()
        if char:
            self.pos += 1
        return char

    def accept(self, expected: str) -> bool:
        """Consume the next character if it equals ``expected``."""
        if self.peek() == expected:
            self.pos += 1
            return True
        return False

    @property
    def remaining(self) -> str:
        return self.text[self.pos :]


def _read_duration_code(cursor: TokenCursor, token: str, index: int) -> int | None:
    """Consume an optional duration prefix.

    Returns:
        The duration code, or None if the token has no digit prefix.
    """
    char = cursor.peek()
    if not char.isdigit():
        return None

    cursor.take()
    if char == "1":
        code = 16 if cursor.accept("6") else 1
    elif char == "3":
        if not cursor.accept("2"):
            raise InvalidNoteDurationError(
                f"note {index}: incomplete duration '3' in {token!r}", token, index
            )
        code = 32
    elif char in ("2", "4", "8"):
        code = int(char)
    else:
        raise InvalidNoteDurationError(
            f"note {index}: invalid duration '{char}' in {token!r}", token, index
        )

    if cursor.peek().isdigit():
        raise InvalidNoteDurationError(
            f"note {index}: invalid duration '{code}{cursor.peek()}' in {token!r}",
            token,
            index,
        )
    return code


def decode_note(token: str, defaults: Defaults, index: int = 0) -> ToneEvent:
    """Decode one note token into a tone event.

    The duration is derived from the duration code (or the default one),
    extended by half when the note is dotted. The frequency comes from the
    pitch table, or is 0 for the pause letter ``p``.

    Args:
        token: Note token such as ``"4c"``, ``"a#"``, ``"2d."`` or ``"p"``.
            Surrounding whitespace is ignored.
        defaults: Melody defaults supplying the tempo and the fallback
            duration code and octave.
        index: Position of the token in the note list, used only in error
            messages.

    Returns:
        ToneEvent with the note's frequency and duration.

    Raises:
        InvalidNoteDurationError: If the duration prefix is not a valid code.
        InvalidNoteLetterError: If the note letter is missing or not A-G/P.
        InvalidNoteOctaveError: If the octave suffix is not 4-7 or the token
            has trailing characters.
    """
    cursor = TokenCursor(token.strip())

    duration_code = _read_duration_code(cursor, token, index)
    if duration_code is None:
        duration_code = defaults.duration_code
    duration_us = defaults.whole_note_duration_ms * 1000 // duration_code

    letter = cursor.take().lower()
    if letter not in NOTE_LETTERS:
        raise InvalidNoteLetterError(
            f"note {index}: invalid note letter {letter!r} in {token!r}", token, index
        )

    sharp = cursor.accept(SHARP_MARKER)
    dotted = cursor.accept(DOT_MARKER)

    octave = defaults.octave
    char = cursor.peek()
    if char and char != DOT_MARKER:
        if char not in OCTAVE_DIGITS:
            raise InvalidNoteOctaveError(
                f"note {index}: invalid octave {char!r} in {token!r}", token, index
            )
        octave = int(cursor.take())

    # The dot may also follow the octave.
    if not dotted:
        dotted = cursor.accept(DOT_MARKER)

    if cursor.remaining:
        raise InvalidNoteOctaveError(
            f"note {index}: unexpected {cursor.remaining!r} in {token!r}", token, index
        )

    if dotted:
        duration_us += duration_us // 2

    return ToneEvent(
        frequency_hz=note_frequency(letter, octave, sharp), duration_us=duration_us
    )
