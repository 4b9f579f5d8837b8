import os
from dotenv import load_dotenv

from tiktok_automation.domain.errors import ConfigurationError

load_dotenv()

# Numeric keys whose environment value could not be parsed (reported by missing_settings)
INVALID_SETTINGS = []


def _float_env(key: str, default: float) -> float:
    """float(os.getenv(key)); an unparsable value falls back to default and is recorded."""
    raw = os.getenv(key, "")
    if not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        INVALID_SETTINGS.append(key)
        return default


# Placeholder defaults: left unchanged they block startup (see missing_settings)
PLACEHOLDER_GEMINI_API_KEY = "your-gemini-api-key"
PLACEHOLDER_TTS_API_KEY = "your-tts-api-key"
PLACEHOLDER_MERGE_SERVICE_URL = "https://your-merge-service.com"
PLACEHOLDER_RAW_VIDEO_FILE_ID = "YOUR_RAW_VIDEO_FILE_ID"
PLACEHOLDER_OUTPUT_FOLDER_ID = "YOUR_OUTPUT_FOLDER_ID"

# Gemini Configuration (script writing and quality review)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", PLACEHOLDER_GEMINI_API_KEY)
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-pro")
GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/models")

# TTS Configuration
# ElevenLabs SDK by default; set TTS_API_URL to use a plain REST speech endpoint instead
ELEVENLABS_API_KEY = os.getenv("ELEVENLABS_API_KEY") or os.getenv("TTS_API_KEY", PLACEHOLDER_TTS_API_KEY)
ELEVENLABS_VOICE_ID = os.getenv("ELEVENLABS_VOICE_ID", "21m00Tcm4TlvDq8ikWAM")  # Rachel
ELEVENLABS_MODEL_ID = os.getenv("ELEVENLABS_MODEL_ID", "eleven_multilingual_v2")
TTS_API_URL = os.getenv("TTS_API_URL", "")
TTS_STABILITY = _float_env("TTS_STABILITY", 0.75)
TTS_SIMILARITY_BOOST = _float_env("TTS_SIMILARITY_BOOST", 0.85)

# Merge service (audio + video -> mp4)
MERGE_SERVICE_URL = os.getenv("MERGE_SERVICE_URL", PLACEHOLDER_MERGE_SERVICE_URL)
MERGE_API_KEY = os.getenv("MERGE_API_KEY", "") or ELEVENLABS_API_KEY  # same key as TTS unless set

# Google Drive Configuration
RAW_VIDEO_FILE_ID = os.getenv("RAW_VIDEO_FILE_ID", PLACEHOLDER_RAW_VIDEO_FILE_ID)
OUTPUT_FOLDER_ID = os.getenv("OUTPUT_FOLDER_ID", PLACEHOLDER_OUTPUT_FOLDER_ID)
GOOGLE_DRIVE_CREDENTIALS_FILE = os.getenv("GOOGLE_DRIVE_CREDENTIALS_FILE", "credentials.json")
GOOGLE_DRIVE_TOKEN_FILE = os.getenv("GOOGLE_DRIVE_TOKEN_FILE", "token.pickle")
DRIVE_FETCH_MODE = os.getenv("DRIVE_FETCH_MODE", "link").lower()  # link | download

# Pipeline Configuration
VIDEO_TOPIC = os.getenv("VIDEO_TOPIC", "artificial intelligence")
TRIGGER_INTERVAL_HOURS = _float_env("TRIGGER_INTERVAL_HOURS", 3.0)
EVALUATE_SPEECH = os.getenv("EVALUATE_SPEECH", "false").lower() == "true"  # optional voiceover gate
HTTP_TIMEOUT = _float_env("HTTP_TIMEOUT", 30.0)  # seconds, every collaborator call


def current_settings() -> dict:
    """Values checked by missing_settings, keyed by environment variable name."""
    return {
        "GEMINI_API_KEY": GEMINI_API_KEY,
        "ELEVENLABS_API_KEY": ELEVENLABS_API_KEY,
        "MERGE_SERVICE_URL": MERGE_SERVICE_URL,
        "RAW_VIDEO_FILE_ID": RAW_VIDEO_FILE_ID,
        "OUTPUT_FOLDER_ID": OUTPUT_FOLDER_ID,
        "GOOGLE_DRIVE_CREDENTIALS_FILE": GOOGLE_DRIVE_CREDENTIALS_FILE,
        "GOOGLE_DRIVE_TOKEN_FILE": GOOGLE_DRIVE_TOKEN_FILE,
    }


def missing_settings(values: dict = None, invalid: list = None) -> list:
    """
    Names of required settings that are empty or still placeholders, followed by
    numeric settings that failed to parse.
    The Drive client secret only counts as missing when no cached token exists either.
    """
    if values is None:
        values = current_settings()
        if invalid is None:
            invalid = INVALID_SETTINGS

    placeholders = {
        "GEMINI_API_KEY": PLACEHOLDER_GEMINI_API_KEY,
        "ELEVENLABS_API_KEY": PLACEHOLDER_TTS_API_KEY,
        "MERGE_SERVICE_URL": PLACEHOLDER_MERGE_SERVICE_URL,
        "RAW_VIDEO_FILE_ID": PLACEHOLDER_RAW_VIDEO_FILE_ID,
        "OUTPUT_FOLDER_ID": PLACEHOLDER_OUTPUT_FOLDER_ID,
    }
    missing = []
    for key, placeholder in placeholders.items():
        value = (values.get(key) or "").strip()
        if not value or value == placeholder:
            missing.append(key)

    credentials_file = values.get("GOOGLE_DRIVE_CREDENTIALS_FILE") or ""
    token_file = values.get("GOOGLE_DRIVE_TOKEN_FILE") or ""
    if not os.path.exists(credentials_file) and not os.path.exists(token_file):
        missing.append("GOOGLE_DRIVE_CREDENTIALS_FILE")
    missing.extend(invalid or [])
    return missing


def require_settings() -> None:
    """Admission control: raise ConfigurationError before any network call is attempted."""
    missing = missing_settings()
    if missing:
        raise ConfigurationError(missing)
