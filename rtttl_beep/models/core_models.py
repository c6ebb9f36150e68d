"""Core domain models for RTTTL decoding."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# 60 sec/min * 4 beats/whole-note * 1000 msec/sec
MSEC_PER_MINUTE_OF_WHOLE_NOTES = 240000


class Defaults(BaseModel):
    """Melody-wide default parameters taken from the RTTTL header.

    Computed once per melody and never modified afterwards, so the model
    is frozen. Notes without an explicit duration code or octave fall back
    to these values.

    Attributes:
        octave: Default octave for notes without an octave suffix (4-7).
        duration_code: Default note length as a fraction of a whole note
            (1, 2, 4, 8, 16 or 32).
        tempo_bpm: Tempo in quarter-note beats per minute (40-200).
    """

    model_config = ConfigDict(frozen=True)

    octave: int = Field(..., ge=4, le=7, description="Default octave")
    duration_code: Literal[1, 2, 4, 8, 16, 32] = Field(
        ..., description="Default duration code"
    )
    tempo_bpm: int = Field(..., ge=40, le=200, description="Beats per minute")

    @property
    def whole_note_duration_ms(self) -> int:
        """Length of a whole note in milliseconds at this tempo.

        Returns:
            ``240000 // tempo_bpm``, using integer division.
        """
        return MSEC_PER_MINUTE_OF_WHOLE_NOTES // self.tempo_bpm


class ToneEvent(BaseModel):
    """One decoded note, ready to be emitted to a tone sink.

    A frequency of zero denotes a rest: the sink stays silent for the
    duration instead of sounding a tone.

    Attributes:
        frequency_hz: Tone frequency in Hz (0 for a rest).
        duration_us: How long the tone is held, in microseconds (positive).
    """

    model_config = ConfigDict(frozen=True)

    frequency_hz: int = Field(..., ge=0, description="Frequency in Hz, 0 is silence")
    duration_us: int = Field(..., ge=1, description="Duration in microseconds")

    @property
    def is_rest(self) -> bool:
        return self.frequency_hz == 0
