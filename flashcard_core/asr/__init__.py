"""Speech recognition boundary: waiting for a finalized spoken answer."""
from .transcription import (
    ListeningSession,
    ScriptedTranscriptionSource,
    Transcript,
    TranscriptionError,
    TranscriptionSource,
)

__all__ = [
    "ListeningSession",
    "ScriptedTranscriptionSource",
    "Transcript",
    "TranscriptionError",
    "TranscriptionSource",
]
