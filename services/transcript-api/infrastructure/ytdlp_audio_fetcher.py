"""yt-dlp implementation of the AudioFetcher interface."""

import asyncio
import os
import uuid
from pathlib import Path

from transcriber_common import setup_logging

from domain.models import AudioAsset
from exceptions import DownloadError

from .interfaces import AudioFetcher

logger = setup_logging()

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
STDERR_TAIL_CHARS = 2000


class YtDlpAudioFetcher(AudioFetcher):
    """Downloads audio-only streams by running the yt-dlp executable."""

    def __init__(
        self,
        scratch_dir: str | os.PathLike,
        executable: str = "yt-dlp",
        format_preference: str = "m4a/bestaudio/best",
    ):
        self._scratch_dir = Path(scratch_dir)
        self._executable = executable
        self._format_preference = format_preference

    def ensure_scratch_dir(self) -> None:
        if not self._scratch_dir.is_dir():
            self._scratch_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Scratch directory created", extra={"path": str(self._scratch_dir)})

    def output_path(self, video_id: str) -> Path:
        """Returns a fresh file path for one download of the video."""
        return self._scratch_dir / f"{video_id}-{uuid.uuid4().hex}.m4a"

    async def fetch(self, video_id: str) -> AudioAsset:
        output_path = self.output_path(video_id)
        args = [
            "-f",
            self._format_preference,
            "-o",
            str(output_path),
            WATCH_URL.format(video_id=video_id),
        ]

        logger.info(
            "Downloading audio",
            extra={"video_id": video_id, "output_path": str(output_path)},
        )

        try:
            process = await asyncio.create_subprocess_exec(
                self._executable,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.exception(
                "Downloader could not be started",
                extra={"video_id": video_id, "executable": self._executable},
            )
            raise DownloadError(video_id, e) from e

        try:
            _, stderr = await process.communicate()
        except asyncio.CancelledError:
            process.kill()
            await process.wait()
            self._remove_partial(output_path)
            logger.warning("Audio download cancelled", extra={"video_id": video_id})
            raise

        if process.returncode != 0:
            self._remove_partial(output_path)
            logger.error(
                "Downloader exited with an error",
                extra={
                    "video_id": video_id,
                    "returncode": process.returncode,
                    "stderr": (stderr or b"").decode(errors="replace")[-STDERR_TAIL_CHARS:],
                },
            )
            raise DownloadError(
                video_id,
                RuntimeError(f"yt-dlp exited with status {process.returncode}"),
            )

        if not output_path.is_file():
            logger.error(
                "Downloaded file does not exist",
                extra={"video_id": video_id, "output_path": str(output_path)},
            )
            raise DownloadError(
                video_id, FileNotFoundError(f"Downloaded file not found: {output_path}")
            )

        logger.info(
            "Audio downloaded",
            extra={
                "video_id": video_id,
                "output_path": str(output_path),
                "size": output_path.stat().st_size,
            },
        )
        return AudioAsset(video_id=video_id, path=output_path)

    def discard(self, asset: AudioAsset) -> None:
        asset.path.unlink(missing_ok=True)
        logger.info("Temporary audio removed", extra={"path": str(asset.path)})

    def _remove_partial(self, output_path: Path) -> None:
        for path in (output_path, output_path.with_name(output_path.name + ".part")):
            try:
                path.unlink(missing_ok=True)
            except OSError:
                logger.exception("Failed to remove partial download", extra={"path": str(path)})
