"""Infrastructure layer exports."""

from .assemblyai_client import (
    AssemblyAIPoller,
    AssemblyAIUploader,
    build_assemblyai_client,
)
from .ytdlp_audio_fetcher import YtDlpAudioFetcher

__all__ = [
    "AssemblyAIPoller",
    "AssemblyAIUploader",
    "build_assemblyai_client",
    "YtDlpAudioFetcher",
]
