"""Exceptions raised while decoding and playing RTTTL melodies.

Errors come in two severities. ``HeaderError`` subclasses are fatal: the
melody is aborted and nothing more is emitted. ``NoteError`` subclasses
concern a single note token; the player logs them and moves on to the
next token. Every class carries a ``kind`` string so callers can tell the
conditions apart without matching on messages.
"""


class RtttlError(Exception):
    """Base exception for RTTTL decoding errors."""

    kind = "rtttl-error"


class HeaderError(RtttlError):
    """Fatal error in the melody structure or its defaults section."""

    kind = "header-error"


class MissingDefaultsError(HeaderError):
    """Raised when the melody has no ``name:defaults:`` header."""

    kind = "missing-defaults"


class InvalidDefaultKeyError(HeaderError):
    """Raised when a defaults key is not a single letter ``a``-``z``."""

    kind = "invalid-default-key"


class InvalidDefaultValueError(HeaderError):
    """Missing or out-of-range value for a required default.

    Attributes:
        key: The defaults key the value belongs to.
        value: The parsed value, or None if the key was missing.
    """

    kind = "invalid-default"
    key = ""
    label = ""

    def __init__(self, value: int | None = None, detail: str = ""):
        self.value = value
        self.missing = value is None
        if not detail:
            if self.missing:
                detail = f"missing default {self.label} ('{self.key}')"
            else:
                detail = f"invalid default {self.label} '{self.key}={value}'"
        super().__init__(detail)


class InvalidOctaveError(InvalidDefaultValueError):
    """Raised when the default octave ``o`` is missing or not in 4-7."""

    kind = "invalid-octave"
    key = "o"
    label = "octave"


class InvalidDurationError(InvalidDefaultValueError):
    """Raised when the default duration ``d`` is missing or not a valid code."""

    kind = "invalid-duration"
    key = "d"
    label = "duration"


class InvalidTempoError(InvalidDefaultValueError):
    """Raised when the tempo ``b`` is missing or not in 40-200."""

    kind = "invalid-tempo"
    key = "b"
    label = "tempo"


class TokenTooLongError(HeaderError):
    """Raised when a note token exceeds the working buffer length."""

    kind = "token-too-long"


class NoteError(RtttlError):
    """Recoverable error in a single note token.

    Attributes:
        token: The offending note token.
        index: Position of the token in the note list, for diagnostics.
    """

    kind = "note-error"

    def __init__(self, message: str, token: str = "", index: int = 0):
        super().__init__(message)
        self.token = token
        self.index = index


class InvalidNoteDurationError(NoteError):
    """Raised when a note's duration prefix is not 1, 2, 4, 8, 16 or 32."""

    kind = "invalid-note-duration"


class InvalidNoteLetterError(NoteError):
    """Raised when a note letter is not A-G or P."""

    kind = "invalid-note-letter"


class InvalidNoteOctaveError(NoteError):
    """Raised when a note's octave suffix is not 4-7 or is followed by garbage."""

    kind = "invalid-note-octave"


class SinkError(Exception):
    """Raised when a tone sink cannot write to its device."""

    kind = "sink-error"
