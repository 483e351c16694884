"""Domain models for the transcript service."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class AudioAsset(BaseModel, frozen=True):
    """A downloaded audio file owned by a single transcription request."""

    video_id: str
    path: Path


class Word(BaseModel, frozen=True):
    """A single transcribed word with its offsets in seconds."""

    word: str
    start: float = Field(ge=0)
    end: float = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "Word":
        if self.end < self.start:
            raise ValueError(f"word ends ({self.end}) before it starts ({self.start})")
        return self


class TranscriptResult(BaseModel, frozen=True, populate_by_name=True):
    """Word-level transcript of a video."""

    video_id: str = Field(alias="videoId")
    words: list[Word]


class RawWord(BaseModel, frozen=True):
    """A word item as returned by the transcription service (offsets in ms)."""

    text: str | None = None
    word: str | None = None
    start: float | None = None
    end: float | None = None


class RawUtterance(BaseModel, frozen=True):
    """A speaker utterance carrying its own word list."""

    words: list[RawWord] | None = None


class FlatWordsPayload(BaseModel, frozen=True):
    """Completed transcript exposing a top-level word list."""

    words: list[RawWord]


class UtterancesPayload(BaseModel, frozen=True):
    """Completed transcript exposing words nested under utterances."""

    utterances: list[RawUtterance]
