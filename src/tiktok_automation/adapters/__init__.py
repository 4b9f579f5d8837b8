"""
Adapters – concrete implementations of ports.
Gemini REST for text and review, ElevenLabs (or a REST endpoint) for speech,
Google Drive for assets, and an HTTP merge service.
"""


def default_adapters(**overrides):
    """
    Build default adapter instances (use package config).
    Overrides: text_generator=..., asset_store=..., etc. for testing or other services.
    Adapters named in overrides are not constructed.
    """
    from tiktok_automation import config

    factories = {
        "text_generator": _gemini,
        "speech_synthesizer": _speech,
        "asset_store": _drive,
        "media_merger": _merger,
    }
    adapters = {}
    for name, factory in factories.items():
        adapters[name] = overrides[name] if name in overrides else factory()

    # Evaluation runs on the same capability as script writing unless swapped out
    adapters["evaluator"] = overrides.get("evaluator", adapters["text_generator"])
    adapters["raw_video_id"] = overrides.get("raw_video_id", config.RAW_VIDEO_FILE_ID)
    adapters["output_folder_id"] = overrides.get("output_folder_id", config.OUTPUT_FOLDER_ID)
    return adapters


def _gemini():
    from tiktok_automation.adapters.gemini import GeminiTextGenerator
    return GeminiTextGenerator()


def _speech():
    from tiktok_automation import config
    if config.TTS_API_URL:
        from tiktok_automation.adapters.speech import RestSpeechSynthesizer
        return RestSpeechSynthesizer()
    from tiktok_automation.adapters.speech import ElevenLabsSynthesizer
    return ElevenLabsSynthesizer()


def _drive():
    from tiktok_automation.adapters.drive import GoogleDriveStore
    return GoogleDriveStore()


def _merger():
    from tiktok_automation.adapters.merger import HttpMediaMerger
    return HttpMediaMerger()
