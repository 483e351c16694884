"""
Transcript API Service.

Entry point for the YouTube word-level transcript service. It handles:
- Downloading video audio with yt-dlp.
- Transcribing the audio with AssemblyAI.
- Returning words with start and end times.
- Distributed tracing with Datadog.
- Structured JSON logging.
"""

from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from transcriber_common import setup_logging

from dependencies import get_config, get_http_client
from routes import transcribe_router

patch(fastapi=True, httpx=True)

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    if not config.assemblyai.api_key:
        logger.error("AssemblyAI API key is not set, set ASSEMBLYAI_API_KEY")
        raise RuntimeError("ASSEMBLYAI_API_KEY is not configured")

    logger.info(
        "Service started",
        extra={"scratch_dir": config.downloader.scratch_dir, "port": config.server.port},
    )
    yield
    await get_http_client().aclose()
    logger.info("Service stopped")


app = FastAPI(title="YouTube Transcript Service", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_config().server.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(transcribe_router)


def main():
    """Starts the HTTP server."""
    config = get_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
