"""Abstract interface for audio download operations."""

from abc import ABC, abstractmethod

from domain.models import AudioAsset


class AudioFetcher(ABC):
    """Abstract base class for video audio downloaders."""

    @abstractmethod
    async def fetch(self, video_id: str) -> AudioAsset:
        """
        Downloads the audio track of a video to a local file.

        Args:
            video_id: The YouTube video ID.

        Returns:
            The downloaded audio asset.

        Raises:
            DownloadError: If the download fails or produces no file.
        """

    @abstractmethod
    def discard(self, asset: AudioAsset) -> None:
        """
        Deletes a previously fetched audio asset.

        Args:
            asset: The asset to delete. Missing files are ignored.

        Raises:
            OSError: If an existing file cannot be removed.
        """
