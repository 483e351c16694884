"""AssemblyAI REST implementations of the transcription interfaces."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from transcriber_common import setup_logging

from domain.models import AudioAsset
from domain.polling import TERMINAL_STATES, PollState, next_state
from exceptions import TranscriptionError, TranscriptionTimeoutError, UploadError

from .interfaces import TranscriptionPoller, TranscriptionUploader

logger = setup_logging()

DEFAULT_BASE_URL = "https://api.assemblyai.com/v2"


def build_assemblyai_client(
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout_seconds: float = 120.0,
) -> httpx.AsyncClient:
    """Creates an HTTP client that authenticates every request to AssemblyAI."""
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"authorization": api_key},
        timeout=timeout_seconds,
    )


class AssemblyAIUploader(TranscriptionUploader):
    """Uploads local audio files to the AssemblyAI ingestion endpoint."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def upload(self, asset: AudioAsset) -> str:
        """
        Sends the whole audio file in a single request.

        The file is read into memory off the event loop and posted as an
        octet-stream body. No retry is attempted.
        """
        file_name = asset.path.name

        try:
            audio_data = await asyncio.to_thread(asset.path.read_bytes)
        except OSError as e:
            logger.exception("Audio file could not be read", extra={"path": str(asset.path)})
            raise UploadError(file_name, e) from e

        logger.info(
            "Uploading audio to AssemblyAI",
            extra={"file_name": file_name, "size": len(audio_data)},
        )

        try:
            response = await self._client.post(
                "/upload",
                content=audio_data,
                headers={"Content-Type": "application/octet-stream"},
            )
            response.raise_for_status()
            upload_url = response.json()["upload_url"]
        except httpx.HTTPStatusError as e:
            logger.exception(
                "AssemblyAI upload rejected",
                extra={
                    "file_name": file_name,
                    "status_code": e.response.status_code,
                    "response": e.response.text,
                },
            )
            raise UploadError(file_name, e) from e
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.exception("AssemblyAI upload failed", extra={"file_name": file_name})
            raise UploadError(file_name, e) from e

        logger.info("Audio uploaded", extra={"file_name": file_name})
        return upload_url


class AssemblyAIPoller(TranscriptionPoller):
    """Creates AssemblyAI transcript jobs and polls them until they finish."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        interval_seconds: float = 10.0,
        max_attempts: int = 60,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self._client = client
        self._interval_seconds = interval_seconds
        self._max_attempts = max_attempts
        self._sleep = sleep

    async def transcribe(self, audio_url: str) -> dict[str, Any]:
        """
        Runs a transcript job to a terminal status.

        The job is checked right after creation and then every
        ``interval_seconds`` until it completes, fails, or ``max_attempts``
        checks have been made. There is no wait after the last check.
        """
        transcript_id = await self._create_job(audio_url)
        state = PollState.CREATED
        attempt = 0

        while state not in TERMINAL_STATES:
            if attempt > 0:
                await self._sleep(self._interval_seconds)

            attempt += 1
            payload = await self._get_job(transcript_id)
            status = payload.get("status")
            state = next_state(status, attempt, self._max_attempts)

            logger.info(
                "Transcript status checked",
                extra={
                    "transcript_id": transcript_id,
                    "attempt": attempt,
                    "max_attempts": self._max_attempts,
                    "status": status,
                },
            )

        if state is PollState.COMPLETED:
            logger.info("Transcription completed", extra={"transcript_id": transcript_id})
            return payload

        if state is PollState.ERROR:
            detail = payload.get("error") or "unknown error"
            logger.error(
                "Transcription failed",
                extra={"transcript_id": transcript_id, "error": detail},
            )
            raise TranscriptionError(transcript_id, str(detail))

        logger.error(
            "Transcription timed out",
            extra={"transcript_id": transcript_id, "attempts": attempt},
        )
        raise TranscriptionTimeoutError(transcript_id, attempt)

    async def _create_job(self, audio_url: str) -> str:
        try:
            response = await self._client.post("/transcript", json={"audio_url": audio_url})
            response.raise_for_status()
            transcript_id = response.json().get("id")
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.exception("Transcript job could not be created")
            raise TranscriptionError(None, "could not create transcript job", e) from e

        if not transcript_id:
            logger.error("Transcript job response has no id")
            raise TranscriptionError(None, "could not create transcript job")

        logger.info("Transcript job created", extra={"transcript_id": transcript_id})
        return str(transcript_id)

    async def _get_job(self, transcript_id: str) -> dict[str, Any]:
        try:
            response = await self._client.get(f"/transcript/{transcript_id}")
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.exception(
                "Transcript status request failed",
                extra={"transcript_id": transcript_id},
            )
            raise TranscriptionError(transcript_id, "status request failed", e) from e

        if not isinstance(payload, dict):
            raise TranscriptionError(transcript_id, "status response is not an object")
        return payload
