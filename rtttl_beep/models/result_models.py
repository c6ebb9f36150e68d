"""Models for the results of decoding and playing a melody.

``Melody`` is the fully materialized decode of an RTTTL string, used by
the event listing and the MIDI export. ``PlaybackResult`` summarises a
streamed playback, where events are emitted as they are decoded and never
collected.
"""

from pydantic import BaseModel, Field

from rtttl_beep.models.core_models import Defaults, ToneEvent


class Melody(BaseModel):
    """A decoded melody.

    Attributes:
        name: Melody name from the RTTTL header (may be empty).
        defaults: Validated melody-wide defaults.
        events: Tone events in playback order.
        skipped: Number of malformed note tokens that were dropped.
    """

    name: str = Field("", description="Melody name")
    defaults: Defaults
    events: list[ToneEvent] = Field(
        default_factory=list, description="Decoded tone events"
    )
    skipped: int = Field(0, ge=0, description="Number of skipped note tokens")

    @property
    def total_duration_us(self) -> int:
        """Sum of all event durations, not counting inter-note gaps."""
        return sum(event.duration_us for event in self.events)


class PlaybackResult(BaseModel):
    """Summary of one call to the player.

    Attributes:
        name: Melody name from the RTTTL header (may be empty).
        defaults: Defaults the melody was played with.
        played: Number of tone events emitted to the sink.
        skipped: Number of malformed note tokens that were dropped.
    """

    name: str = Field("", description="Melody name")
    defaults: Defaults
    played: int = Field(0, ge=0, description="Number of emitted events")
    skipped: int = Field(0, ge=0, description="Number of skipped note tokens")
