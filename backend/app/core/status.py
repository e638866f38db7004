from __future__ import annotations

from enum import Enum


class PipelineStage(str, Enum):
    idle = "idle"
    identifying = "identifying"
    fetching_lyrics = "fetching_lyrics"


class PipelineOutcome(str, Enum):
    no_credential = "no_credential"
    identification_failed = "identification_failed"
    lyrics_failed = "lyrics_failed"
    success = "success"
    error = "error"

