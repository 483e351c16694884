"""YouTube video ID validation and extraction."""

import re

VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")

# Watch (?v=), embed, /v/, /e/, shorts, live and youtu.be links.
_URL_PATTERN = re.compile(
    r"(?:youtube(?:-nocookie)?\.com/"
    r"(?:(?:embed|v|e|shorts|live)/|[^\s\"]*?[?&]v=)"
    r"|youtu\.be/)"
    r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"
)


def is_valid_video_id(video_id: str | None) -> bool:
    """Returns True if the value has the shape of a YouTube video ID."""
    return bool(video_id) and VIDEO_ID_PATTERN.match(video_id) is not None


def extract_video_id(url: str | None) -> str | None:
    """
    Extracts the 11-character video ID from a YouTube URL.

    Returns None when the URL has no 11-character ID segment.
    """
    if not url:
        return None
    match = _URL_PATTERN.search(url.strip())
    return match.group(1) if match else None
