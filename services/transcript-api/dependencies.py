"""Dependency injection configuration for the transcript-api service."""

import httpx
from transcriber_common import setup_logging

from config import AppConfig, load_config
from domain import TranscriptNormalizer
from handlers import TranscriptionPipeline
from infrastructure import (
    AssemblyAIPoller,
    AssemblyAIUploader,
    YtDlpAudioFetcher,
    build_assemblyai_client,
)

logger = setup_logging()

_config = load_config()

# yt-dlp setup
_fetcher = YtDlpAudioFetcher(
    scratch_dir=_config.downloader.scratch_dir,
    executable=_config.downloader.executable,
    format_preference=_config.downloader.format_preference,
)
_fetcher.ensure_scratch_dir()

# AssemblyAI setup
_http_client = build_assemblyai_client(
    api_key=_config.assemblyai.api_key,
    base_url=_config.assemblyai.base_url,
    timeout_seconds=_config.assemblyai.request_timeout_seconds,
)
_uploader = AssemblyAIUploader(_http_client)
_poller = AssemblyAIPoller(
    _http_client,
    interval_seconds=_config.polling.interval_seconds,
    max_attempts=_config.polling.max_attempts,
)

_pipeline = TranscriptionPipeline(_fetcher, _uploader, _poller, TranscriptNormalizer())


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_http_client() -> httpx.AsyncClient:
    """Returns the shared AssemblyAI HTTP client."""
    return _http_client


def get_pipeline() -> TranscriptionPipeline:
    """Returns the configured transcription pipeline."""
    return _pipeline
