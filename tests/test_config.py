import pytest

from config import DEFAULT_SCRATCH_DIR, load_config

ENV_VARS = [
    "ASSEMBLYAI_API_KEY",
    "REACT_APP_ASSEMBLYAI_API_KEY",
    "ASSEMBLYAI_BASE_URL",
    "ASSEMBLYAI_REQUEST_TIMEOUT",
    "TRANSCRIPT_POLL_INTERVAL",
    "TRANSCRIPT_POLL_MAX_ATTEMPTS",
    "AUDIO_SCRATCH_DIR",
    "YTDLP_EXECUTABLE",
    "YTDLP_FORMAT",
    "HOST",
    "PORT",
    "CORS_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        # setenv first so values loaded from dotenv files are undone on teardown
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env):
    config = load_config()

    assert config.assemblyai.api_key == ""
    assert config.assemblyai.base_url == "https://api.assemblyai.com/v2"
    assert config.polling.interval_seconds == 10.0
    assert config.polling.max_attempts == 60
    assert config.downloader.scratch_dir == DEFAULT_SCRATCH_DIR
    assert config.downloader.executable == "yt-dlp"
    assert config.downloader.format_preference == "m4a/bestaudio/best"
    assert config.server.port == 5001
    assert config.server.cors_origins == ("*",)


def test_values_from_environment(clean_env, tmp_path):
    clean_env.setenv("ASSEMBLYAI_API_KEY", "secret")
    clean_env.setenv("ASSEMBLYAI_BASE_URL", "https://eu.assembly.test/v2/")
    clean_env.setenv("TRANSCRIPT_POLL_INTERVAL", "2.5")
    clean_env.setenv("TRANSCRIPT_POLL_MAX_ATTEMPTS", "12")
    clean_env.setenv("AUDIO_SCRATCH_DIR", str(tmp_path / "audio"))
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("CORS_ORIGINS", "http://localhost:3000, https://app.test")

    config = load_config()

    assert config.assemblyai.api_key == "secret"
    assert config.assemblyai.base_url == "https://eu.assembly.test/v2"
    assert config.polling.interval_seconds == 2.5
    assert config.polling.max_attempts == 12
    assert config.downloader.scratch_dir == str(tmp_path / "audio")
    assert config.server.port == 8080
    assert config.server.cors_origins == ("http://localhost:3000", "https://app.test")


def test_legacy_api_key_variable(clean_env):
    clean_env.setenv("REACT_APP_ASSEMBLYAI_API_KEY", "legacy")

    assert load_config().assemblyai.api_key == "legacy"


def test_api_key_read_from_env_local_file(clean_env, tmp_path):
    (tmp_path / ".env.local").write_text("ASSEMBLYAI_API_KEY=from-file\n")

    assert load_config().assemblyai.api_key == "from-file"


def test_invalid_poll_budget_is_rejected(clean_env):
    clean_env.setenv("TRANSCRIPT_POLL_MAX_ATTEMPTS", "0")

    with pytest.raises(ValueError):
        load_config()
