"""Domain models for the rtttl-beep package.

This module provides a centralized location for all data models used by
the decoder, the player and the command-line tools. It includes:

- Core domain models (Defaults, ToneEvent)
- Decoding and playback results (Melody, PlaybackResult)
- Configuration parameters for the player, the device and single beeps

All models are built using Pydantic for data validation, so an invalid
tone event or out-of-range setting fails loudly at construction time.
"""

# Re-export core models
from rtttl_beep.models.core_models import Defaults, ToneEvent

# Re-export result models
from rtttl_beep.models.result_models import Melody, PlaybackResult

# Re-export setting models
from rtttl_beep.models.settings_models import (
    PlayerParams,
    DeviceParams,
    BeepParams,
    PlaybackParams,
)
