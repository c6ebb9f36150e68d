"""Static pitch tables for RTTTL notes.

Rows are octaves 4-7 and columns are semitone indices ordered
C, C#, D, D#, E, F, F#, G, G#, A, A#, B. The table is A-anchored: A of
octave 5 is 440 Hz while C of octave 5 is 523 Hz, so in every row the
A, A# and B columns sit below the C column.
"""

MIN_OCTAVE = 4
MAX_OCTAVE = 7

SEMITONE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# fmt: off
PITCH_TABLE = {
    4: (262, 277, 294, 311, 330, 349, 370, 392, 415, 220, 233, 247),
    5: (523, 554, 587, 622, 659, 698, 740, 784, 831, 440, 466, 494),
    6: (1047, 1109, 1175, 1245, 1319, 1397, 1480, 1568, 1661, 880, 932, 988),
    7: (2093, 2217, 2349, 2489, 2637, 2794, 2960, 3136, 3322, 1760, 1865, 1976),
}
# fmt: on

# B and E keep their column when sharpened.
NATURAL_COLUMNS = {"a": 9, "b": 11, "c": 0, "d": 2, "e": 4, "f": 5, "g": 7}
SHARP_COLUMNS = {"a": 10, "b": 11, "c": 1, "d": 3, "e": 4, "f": 6, "g": 8}

PAUSE_LETTER = "p"
NOTE_LETTERS = frozenset(NATURAL_COLUMNS) | {PAUSE_LETTER}


def semitone_column(letter: str, sharp: bool = False) -> int:
    """Return the pitch table column for a note letter.

    Args:
        letter: Note letter a-g, case-insensitive.
        sharp: Whether the note carries a ``#`` marker.

    Returns:
        Column index 0-11 into a ``PITCH_TABLE`` row.

    Raises:
        KeyError: If ``letter`` is not a pitched note letter.
    """
    columns = SHARP_COLUMNS if sharp else NATURAL_COLUMNS
    return columns[letter.lower()]


def note_frequency(letter: str, octave: int, sharp: bool = False) -> int:
    """Look up the frequency of a note.

    The pause letter ``p`` is silent and yields 0 whatever the octave
    or sharp marker.

    Args:
        letter: Note letter a-g or p, case-insensitive.
        octave: Octave 4-7.
        sharp: Whether the note carries a ``#`` marker.

    Returns:
        Frequency in Hz, or 0 for a pause.

    Raises:
        KeyError: If the letter or octave is outside the table.
    """
    if letter.lower() == PAUSE_LETTER:
        return 0
    return PITCH_TABLE[octave][semitone_column(letter, sharp)]
