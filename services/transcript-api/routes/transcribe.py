"""Transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from transcriber_common import setup_logging

from dependencies import get_pipeline
from domain import TranscriptResult, extract_video_id
from exceptions import PipelineError, VideoIdValidationError
from handlers import TranscriptionPipeline
from response_models import ErrorResponse, TranscribeRequest

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["transcripts"])

PipelineDep = Annotated[TranscriptionPipeline, Depends(get_pipeline)]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@router.post(
    "/transcribe",
    response_model=TranscriptResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def transcribe_video(
    request: TranscribeRequest, pipeline: PipelineDep
) -> TranscriptResult | JSONResponse:
    """
    Transcribes the audio of a YouTube video.

    Returns every recognized word with its start and end time in seconds.
    Failures are returned as {"error": <message>}.
    """
    video_id = request.video_id
    if not video_id and request.url:
        video_id = extract_video_id(request.url)
        if video_id is None:
            logger.warning("No video ID in URL", extra={"url": request.url})
            return _error(400, "Could not extract a video ID from URL")

    logger.info("Received transcription request", extra={"video_id": video_id})

    try:
        return await pipeline.run(video_id or "")
    except VideoIdValidationError as e:
        logger.warning("Rejected transcription request", extra={"error": str(e)})
        return _error(400, str(e))
    except PipelineError as e:
        return _error(500, str(e))
