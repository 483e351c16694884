"""Handler that turns a video ID into a word-level transcript."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from transcriber_common import setup_logging

from domain import AudioAsset, TranscriptNormalizer, TranscriptResult, is_valid_video_id
from exceptions import (
    DownloadError,
    InvalidPayloadError,
    PipelineError,
    TranscriptionError,
    TranscriptionTimeoutError,
    UploadError,
    VideoIdValidationError,
)
from infrastructure.interfaces import AudioFetcher, TranscriptionPoller, TranscriptionUploader

logger = setup_logging()

PIPELINE_ERRORS = (
    DownloadError,
    UploadError,
    TranscriptionError,
    TranscriptionTimeoutError,
    InvalidPayloadError,
)
UNEXPECTED_ERROR_MESSAGE = "Failed to process transcription"


class TranscriptionPipeline:
    """Orchestrates download, upload, transcription and normalization."""

    def __init__(
        self,
        fetcher: AudioFetcher,
        uploader: TranscriptionUploader,
        poller: TranscriptionPoller,
        normalizer: TranscriptNormalizer,
    ):
        self._fetcher = fetcher
        self._uploader = uploader
        self._poller = poller
        self._normalizer = normalizer

    async def run(self, video_id: str) -> TranscriptResult:
        """
        Produces the word-level transcript of a video.

        The downloaded audio is deleted before returning, whatever the outcome.

        Args:
            video_id: The YouTube video ID.

        Returns:
            TranscriptResult with the ordered words.

        Raises:
            VideoIdValidationError: If the ID is missing or malformed.
            PipelineError: If any step fails.
        """
        if not video_id:
            raise VideoIdValidationError("Video ID is required")
        if not is_valid_video_id(video_id):
            raise VideoIdValidationError(f"Invalid YouTube video ID '{video_id}'", video_id)

        logger.info("Processing transcription", extra={"video_id": video_id})

        try:
            async with self._audio(video_id) as asset:
                upload_url = await self._uploader.upload(asset)
                payload = await self._poller.transcribe(upload_url)
                words = self._normalizer.normalize(payload)
        except PIPELINE_ERRORS as e:
            logger.exception("Transcription failed", extra={"video_id": video_id})
            raise PipelineError(video_id, str(e), e) from e
        except Exception as e:
            logger.exception("Unexpected transcription failure", extra={"video_id": video_id})
            raise PipelineError(video_id, UNEXPECTED_ERROR_MESSAGE, e) from e

        logger.info(
            "Transcription processed",
            extra={"video_id": video_id, "word_count": len(words)},
        )
        return TranscriptResult(video_id=video_id, words=words)

    @asynccontextmanager
    async def _audio(self, video_id: str) -> AsyncIterator[AudioAsset]:
        """Fetches the audio of a video and deletes it when the block exits."""
        asset = await self._fetcher.fetch(video_id)
        try:
            yield asset
        finally:
            try:
                self._fetcher.discard(asset)
            except Exception:
                logger.exception(
                    "Failed to remove temporary audio",
                    extra={"video_id": video_id, "path": str(asset.path)},
                )
