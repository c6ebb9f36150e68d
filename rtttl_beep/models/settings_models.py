"""Parameter models for playback configuration.

This module defines Pydantic models that hold the configurable parameters
of the player, the beeper device and the single-tone beep command. The
command-line front ends build these models from their flags, so range
checks live here rather than in the argument parser.
"""

from pydantic import BaseModel, Field

EVENT_DEVICE_TEMPLATE = "/dev/input/event{}"


class PlayerParams(BaseModel):
    """Configuration for the melody player.

    Attributes:
        gap_ratio: Silence after each note as a fraction of the note's
            duration (0.0-1.0, default 0.25).
        max_token_length: Longest accepted note token in characters
            (default 31). Longer tokens abort the melody.
    """

    gap_ratio: float = Field(
        0.25, ge=0.0, le=1.0, description="Inter-note gap as a fraction of the note"
    )
    max_token_length: int = Field(
        31, ge=1, le=255, description="Maximum note token length"
    )


class DeviceParams(BaseModel):
    """Location of the beeper input-event device.

    Attributes:
        event_number: N in ``/dev/input/eventN`` (default 0).
    """

    event_number: int = Field(0, ge=0, description="Input event device number")

    @property
    def path(self) -> str:
        return EVENT_DEVICE_TEMPLATE.format(self.event_number)


class BeepParams(BaseModel):
    """Parameters of a single beep.

    Attributes:
        frequency_hz: Tone frequency in Hz. Zero selects the device's
            built-in bell sound instead of a tone (default 0).
        duration_ms: Length of the beep in milliseconds (default 200).
    """

    frequency_hz: int = Field(0, ge=0, le=20000, description="Tone frequency in Hz")
    duration_ms: int = Field(200, ge=1, description="Beep duration in milliseconds")


class PlaybackParams(BaseModel):
    """Complete configuration for a command-line playback session.

    Attributes:
        player: Parameters for melody playback.
        device: Parameters locating the beeper device.
        beep: Parameters for a single beep.
    """

    player: PlayerParams = Field(
        default_factory=PlayerParams, description="Melody player parameters"
    )
    device: DeviceParams = Field(
        default_factory=DeviceParams, description="Beeper device parameters"
    )
    beep: BeepParams = Field(
        default_factory=BeepParams, description="Single beep parameters"
    )
