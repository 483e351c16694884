"""Handler layer exports."""

from .transcription_pipeline import TranscriptionPipeline

__all__ = ["TranscriptionPipeline"]
