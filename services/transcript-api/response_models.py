"""Request and response models for the transcript API."""

from pydantic import BaseModel, Field


class TranscribeRequest(BaseModel, populate_by_name=True, str_strip_whitespace=True):
    """Body of a transcription request; either a video ID or a YouTube URL."""

    video_id: str | None = Field(default=None, alias="videoId")
    url: str | None = None


class ErrorResponse(BaseModel):
    """Error body returned for failed requests."""

    error: str
