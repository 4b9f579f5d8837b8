"""ITextGenerator adapter for the Gemini generateContent REST API."""

from typing import Optional

from tiktok_automation.adapters import http
from tiktok_automation.domain.errors import CollaboratorError, EmptyResultError
from tiktok_automation.ports.interfaces import ITextGenerator


class GeminiTextGenerator(ITextGenerator):
    """Calls Gemini over REST; used for both script writing and evaluation."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        from tiktok_automation import config
        self.api_key = api_key if api_key is not None else config.GEMINI_API_KEY
        self.model = model or config.GEMINI_MODEL
        self.base_url = (base_url or config.GEMINI_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.model}:generateContent"

    def generate(self, prompt: str, temperature: float, max_output_tokens: int) -> str:
        data = {
            "contents": [
                {
                    "parts": [
                        {
                            "text": prompt
                        }
                    ]
                }
            ],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens
            }
        }
        # API key in a header keeps it out of URLs and error messages
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json"
        }
        response = http.send("POST", self.url, self.timeout, headers=headers, json_body=data)
        return self.first_fragment(http.parse_json(response))

    @staticmethod
    def first_fragment(result) -> str:
        """Text of the first part of the first candidate; anything less is an empty result."""
        if not isinstance(result, dict):
            raise CollaboratorError("Gemini reply is not a JSON object")
        candidates = result.get("candidates") or []
        if not isinstance(candidates, list):
            raise CollaboratorError("Gemini candidates is not a list")
        if not candidates:
            raise EmptyResultError("Gemini returned no candidates")
        candidate = candidates[0]
        if not isinstance(candidate, dict):
            raise CollaboratorError("Gemini candidate is not a JSON object")
        content = candidate.get("content") or {}
        if not isinstance(content, dict):
            raise CollaboratorError("Gemini candidate content is not a JSON object")
        parts = content.get("parts") or []
        if not isinstance(parts, list):
            raise CollaboratorError("Gemini content parts is not a list")
        if not parts:
            finish_reason = candidate.get("finishReason", "UNKNOWN")
            raise EmptyResultError(f"Gemini candidate has no parts (finishReason: {finish_reason})")
        if not isinstance(parts[0], dict):
            raise CollaboratorError("Gemini content part is not a JSON object")
        text = parts[0].get("text") or ""
        if not isinstance(text, str):
            raise CollaboratorError("Gemini text fragment is not a string")
        if not text.strip():
            raise EmptyResultError("Gemini returned an empty text fragment")
        return text
