"""RTTTL ringtone decoding and beeper playback.

This package turns RTTTL (RingTone Text Transfer Language) melodies into
timed tone events and plays them on a tone sink, typically a PC speaker or
buzzer driven through the Linux input subsystem.

Decoding proceeds in three steps:
1. Split the melody into name, defaults and notes sections
2. Parse and validate the defaults (octave, duration, tempo)
3. Decode each note token into a (frequency, duration) tone event

Example:
    Playing a melody on the first input event device:

    >>> from rtttl_beep.player import play
    >>> from rtttl_beep.sinks import EvdevToneSink
    >>>
    >>> with EvdevToneSink.open(0) as sink:
    ...     play(sink, "scale:d=8,o=5,b=120:c,d,e,f,g,a6,b6,c6")
"""
