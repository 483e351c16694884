import os
import sys
import tempfile

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# The service modules are run from their own directory (`python main.py`), so
# make them and the shared package importable in tests.
for path in (
    os.path.join(ROOT_DIR, "services", "transcript-api"),
    os.path.join(ROOT_DIR, "services", "common", "src"),
):
    if path not in sys.path:
        sys.path.insert(0, path)

os.environ.setdefault("AUDIO_SCRATCH_DIR", tempfile.mkdtemp(prefix="yt-transcriber-tests-"))
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")
