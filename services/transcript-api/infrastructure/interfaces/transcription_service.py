"""Abstract interfaces for transcription service operations."""

from abc import ABC, abstractmethod
from typing import Any

from domain.models import AudioAsset


class TranscriptionUploader(ABC):
    """Abstract base class for uploading audio to a transcription backend."""

    @abstractmethod
    async def upload(self, asset: AudioAsset) -> str:
        """
        Uploads an audio asset.

        Args:
            asset: The local audio file to upload.

        Returns:
            The remote URL referencing the uploaded audio.

        Raises:
            UploadError: If the upload fails.
        """


class TranscriptionPoller(ABC):
    """Abstract base class for running transcription jobs to completion."""

    @abstractmethod
    async def transcribe(self, audio_url: str) -> dict[str, Any]:
        """
        Creates a transcription job and waits for it to finish.

        Args:
            audio_url: Remote URL of previously uploaded audio.

        Returns:
            The raw payload of the completed transcript.

        Raises:
            TranscriptionError: If the job fails or cannot be created or read.
            TranscriptionTimeoutError: If the job does not finish in time.
        """
