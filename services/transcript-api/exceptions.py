"""Custom exceptions for the transcript-api service."""


class DownloadError(Exception):
    """Raised when the audio track of a video cannot be downloaded."""

    def __init__(self, video_id: str, cause: Exception | None = None):
        self.video_id = video_id
        self.cause = cause
        super().__init__(f"Failed to download audio for video '{video_id}'")


class UploadError(Exception):
    """Raised when uploading audio to the transcription service fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(
            f"Failed to upload audio file '{file_name}' to the transcription service"
        )


class TranscriptionError(Exception):
    """Raised when a transcription job fails or cannot be created or read."""

    def __init__(
        self,
        transcript_id: str | None,
        detail: str,
        cause: Exception | None = None,
    ):
        self.transcript_id = transcript_id
        self.detail = detail
        self.cause = cause
        if transcript_id:
            super().__init__(f"Transcription '{transcript_id}' failed: {detail}")
        else:
            super().__init__(f"Transcription failed: {detail}")


class TranscriptionTimeoutError(TimeoutError):
    """Raised when a transcription job does not finish within the poll budget."""

    def __init__(self, transcript_id: str, attempts: int):
        self.transcript_id = transcript_id
        self.attempts = attempts
        super().__init__(
            f"Transcription '{transcript_id}' timed out after {attempts} status checks"
        )


class InvalidPayloadError(Exception):
    """Raised when a completed transcript carries no usable words."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(
            f"Invalid transcript data received from the transcription service: {reason}"
        )


class VideoIdValidationError(ValueError):
    """Raised when a request carries a missing or malformed video ID."""

    def __init__(self, message: str, video_id: str | None = None):
        self.video_id = video_id
        super().__init__(message)


class PipelineError(Exception):
    """Single outward-facing error for a failed transcription request."""

    def __init__(self, video_id: str, message: str, cause: Exception | None = None):
        self.video_id = video_id
        self.cause = cause
        super().__init__(message)
