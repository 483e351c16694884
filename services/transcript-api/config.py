"""Application configuration loaded from environment variables."""

import os
import tempfile

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_SCRATCH_DIR = os.path.join(tempfile.gettempdir(), "yt-transcriber")


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI REST API configuration."""

    api_key: str
    base_url: str = "https://api.assemblyai.com/v2"
    request_timeout_seconds: float = Field(default=120.0, gt=0)


class PollingConfig(BaseModel, frozen=True):
    """Transcript job polling configuration."""

    interval_seconds: float = Field(default=10.0, ge=0)
    max_attempts: int = Field(default=60, ge=1)


class DownloaderConfig(BaseModel, frozen=True):
    """yt-dlp audio download configuration."""

    scratch_dir: str = DEFAULT_SCRATCH_DIR
    executable: str = "yt-dlp"
    format_preference: str = "m4a/bestaudio/best"


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 5001
    cors_origins: tuple[str, ...] = ("*",)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    polling: PollingConfig = PollingConfig()
    downloader: DownloaderConfig = DownloaderConfig()
    server: ServerConfig = ServerConfig()


def _split_origins(value: str) -> tuple[str, ...]:
    origins = tuple(o.strip() for o in value.split(",") if o.strip())
    return origins or ("*",)


def load_config() -> AppConfig:
    """Loads configuration from environment variables and .env.local / .env in the working directory."""
    load_dotenv(".env.local")
    load_dotenv(".env")

    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY")
            or os.getenv("REACT_APP_ASSEMBLYAI_API_KEY", ""),
            base_url=os.getenv(
                "ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com/v2"
            ).rstrip("/"),
            request_timeout_seconds=float(
                os.getenv("ASSEMBLYAI_REQUEST_TIMEOUT", "120")
            ),
        ),
        polling=PollingConfig(
            interval_seconds=float(os.getenv("TRANSCRIPT_POLL_INTERVAL", "10")),
            max_attempts=int(os.getenv("TRANSCRIPT_POLL_MAX_ATTEMPTS", "60")),
        ),
        downloader=DownloaderConfig(
            scratch_dir=os.getenv("AUDIO_SCRATCH_DIR", DEFAULT_SCRATCH_DIR),
            executable=os.getenv("YTDLP_EXECUTABLE", "yt-dlp"),
            format_preference=os.getenv("YTDLP_FORMAT", "m4a/bestaudio/best"),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5001")),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        ),
    )
