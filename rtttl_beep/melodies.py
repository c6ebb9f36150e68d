"""Built-in RTTTL melodies."""

# Tetris theme (Korobeiniki), based on the arrangement at
# https://www.flutetunes.com/tunes.php?id=192
_TETRIS_PHRASE = (
    "e,8b,8c,d,8c,8b,"
    "a,8a,8c,e,8d,8c,"
    "b.,8c,d,e,"
    "c,a,8a,a,8b,8c,"
    "d.,8f,a6,8g,8f,"
    "e.,8c,e,8d,8c,"
    "b,8b,8c,d,e,"
    "c,a,a,p"
)
_TETRIS_BRIDGE = (
    "2e,2c,"
    "2d,2b,"
    "2c,2a,"
    "2g#4,b,8p,"
    "2e,2c,"
    "2d,2b,"
    "c,e,2a6,"
    "2g#"
)

TETRIS = "tetris:d=4,o=5,b=144:" + ",".join(
    [_TETRIS_PHRASE, _TETRIS_PHRASE, _TETRIS_BRIDGE]
)

BEEP = "beep:d=8,o=5,b=80:2b5"

MELODIES = {
    "tetris": TETRIS,
    "beep": BEEP,
}


def get_melody(name: str) -> str:
    """Look up a built-in melody by name (case-insensitive).

    Raises:
        KeyError: If there is no built-in melody with that name.
    """
    return MELODIES[name.lower()]


def get_melody_names() -> list[str]:
    return sorted(MELODIES)
