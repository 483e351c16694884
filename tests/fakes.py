"""In-memory stand-ins for the pipeline's external collaborators."""

import asyncio
from pathlib import Path

from domain import AudioAsset
from infrastructure.interfaces import AudioFetcher, TranscriptionPoller, TranscriptionUploader

VIDEO_ID = "dQw4w9WgXcQ"
UPLOAD_URL = "https://x/u1"
COMPLETED_PAYLOAD = {
    "id": "t-1",
    "status": "completed",
    "words": [{"word": "Hello", "start": 0, "end": 400}],
}


class FakeFetcher(AudioFetcher):
    def __init__(self, scratch_dir: Path, error: Exception | None = None):
        self.scratch_dir = scratch_dir
        self.error = error
        self.fetched: list[AudioAsset] = []
        self.discarded: list[AudioAsset] = []

    async def fetch(self, video_id: str) -> AudioAsset:
        if self.error is not None:
            raise self.error
        path = self.scratch_dir / f"{video_id}.m4a"
        path.write_bytes(b"fake audio")
        asset = AudioAsset(video_id=video_id, path=path)
        self.fetched.append(asset)
        return asset

    def discard(self, asset: AudioAsset) -> None:
        self.discarded.append(asset)
        asset.path.unlink(missing_ok=True)


class FakeUploader(TranscriptionUploader):
    def __init__(self, upload_url: str = UPLOAD_URL, error: Exception | None = None):
        self.upload_url = upload_url
        self.error = error
        self.calls: list[AudioAsset] = []

    async def upload(self, asset: AudioAsset) -> str:
        self.calls.append(asset)
        assert asset.path.exists()
        if self.error is not None:
            raise self.error
        return self.upload_url


class FakePoller(TranscriptionPoller):
    def __init__(self, payload: dict | None = None, error: BaseException | None = None):
        self.payload = COMPLETED_PAYLOAD if payload is None else payload
        self.error = error
        self.calls: list[str] = []

    async def transcribe(self, audio_url: str) -> dict:
        self.calls.append(audio_url)
        if self.error is not None:
            raise self.error
        return self.payload


class HangingPoller(TranscriptionPoller):
    """Poller that never finishes, for cancellation tests."""

    def __init__(self):
        self.started = asyncio.Event()

    async def transcribe(self, audio_url: str) -> dict:
        self.started.set()
        await asyncio.Event().wait()
        return {}
