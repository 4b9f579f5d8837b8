"""ISpeechSynthesizer adapters: ElevenLabs SDK (by value) and a plain REST endpoint (either shape)."""

import base64
from typing import Optional

from elevenlabs import VoiceSettings
from elevenlabs.client import ElevenLabs

from tiktok_automation.adapters import http
from tiktok_automation.domain.errors import CollaboratorError, EmptyResultError
from tiktok_automation.domain.models import Artifact
from tiktok_automation.ports.interfaces import ISpeechSynthesizer

AUDIO_MIME_TYPE = "audio/mpeg"


class ElevenLabsSynthesizer(ISpeechSynthesizer):
    """Wraps the ElevenLabs client; returns the whole clip in memory."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        voice_id: Optional[str] = None,
        model_id: Optional[str] = None,
        stability: Optional[float] = None,
        similarity_boost: Optional[float] = None,
        timeout: Optional[float] = None,
        client=None,
    ):
        from tiktok_automation import config
        self.voice_id = voice_id or config.ELEVENLABS_VOICE_ID
        self.model_id = model_id or config.ELEVENLABS_MODEL_ID
        self.stability = stability if stability is not None else config.TTS_STABILITY
        self.similarity_boost = (
            similarity_boost if similarity_boost is not None else config.TTS_SIMILARITY_BOOST
        )
        if client is None:
            client = ElevenLabs(
                api_key=api_key if api_key is not None else config.ELEVENLABS_API_KEY,
                timeout=timeout if timeout is not None else config.HTTP_TIMEOUT,
            )
        self._client = client

    def synthesize(self, text: str) -> Artifact:
        print(f"  🔊 Using ElevenLabs voice {self.voice_id} ({self.model_id})")
        try:
            response = self._client.text_to_speech.convert(
                text=text,
                voice_id=self.voice_id,
                model_id=self.model_id,
                voice_settings=VoiceSettings(
                    stability=self.stability,
                    similarity_boost=self.similarity_boost,
                ),
            )
            # convert() streams the clip as chunks
            audio_bytes = b""
            for chunk in response:
                if isinstance(chunk, bytes):
                    audio_bytes += chunk
                elif hasattr(chunk, "read"):
                    audio_bytes += chunk.read()
                else:
                    audio_bytes += bytes(chunk)
        except Exception as e:
            raise CollaboratorError(f"ElevenLabs request failed: {e}") from e

        if not audio_bytes:
            raise EmptyResultError("ElevenLabs returned no audio")
        return Artifact.by_value(audio_bytes, AUDIO_MIME_TYPE)


class RestSpeechSynthesizer(ISpeechSynthesizer):
    """
    Generic TTS endpoint. The reply decides the artifact shape:
    raw audio body -> by value, JSON audio_url/url -> by reference,
    JSON base64 file/audio -> by value.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        stability: Optional[float] = None,
        similarity_boost: Optional[float] = None,
        timeout: Optional[float] = None,
    ):
        from tiktok_automation import config
        self.api_url = api_url or config.TTS_API_URL
        self.api_key = api_key if api_key is not None else config.ELEVENLABS_API_KEY
        self.stability = stability if stability is not None else config.TTS_STABILITY
        self.similarity_boost = (
            similarity_boost if similarity_boost is not None else config.TTS_SIMILARITY_BOOST
        )
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT

    def synthesize(self, text: str) -> Artifact:
        body = {
            "text": text,
            "voice_settings": {
                "stability": self.stability,
                "similarity_boost": self.similarity_boost,
            },
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        response = http.send("POST", self.api_url, self.timeout, headers=headers, json_body=body)

        content_type = (response.headers.get("Content-Type") or "").split(";")[0].strip()
        if content_type.startswith("audio/"):
            if not response.content:
                raise EmptyResultError("TTS endpoint returned an empty audio body")
            return Artifact.by_value(response.content, content_type)

        return self.artifact_from_json(http.parse_json(response))

    @staticmethod
    def artifact_from_json(payload) -> Artifact:
        if not isinstance(payload, dict):
            raise CollaboratorError("TTS reply is not a JSON object")
        url = payload.get("audio_url") or payload.get("url")
        if url:
            return Artifact.by_reference(url, AUDIO_MIME_TYPE)
        encoded = payload.get("file") or payload.get("audio")
        if encoded:
            try:
                return Artifact.by_value(base64.b64decode(encoded), AUDIO_MIME_TYPE)
            except (TypeError, ValueError) as e:
                raise CollaboratorError(f"TTS audio payload is not valid base64: {e}") from e
        raise EmptyResultError(f"TTS reply carried no audio (keys: {sorted(payload.keys())})")
