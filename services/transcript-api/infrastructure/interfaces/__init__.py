"""Infrastructure interface exports."""

from .audio_fetcher import AudioFetcher
from .transcription_service import TranscriptionPoller, TranscriptionUploader

__all__ = ["AudioFetcher", "TranscriptionPoller", "TranscriptionUploader"]
