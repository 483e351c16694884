"""Domain layer exports."""

from .models import AudioAsset, TranscriptResult, Word
from .polling import PollState, next_state
from .transcript_normalizer import TranscriptNormalizer
from .video_ids import extract_video_id, is_valid_video_id

__all__ = [
    "AudioAsset",
    "TranscriptResult",
    "Word",
    "PollState",
    "next_state",
    "TranscriptNormalizer",
    "extract_video_id",
    "is_valid_video_id",
]
