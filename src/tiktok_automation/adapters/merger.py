"""IMediaMerger adapter for the HTTP merge service."""

import base64
from typing import Optional

from tiktok_automation.adapters import http
from tiktok_automation.domain.errors import CollaboratorError, EmptyResultError
from tiktok_automation.domain.models import Artifact
from tiktok_automation.ports.interfaces import IMediaMerger


def encode_artifact(artifact: Artifact) -> str:
    """URL as-is for references; base64 text for inline bytes."""
    if artifact.is_reference:
        return artifact.url
    return base64.b64encode(artifact.data).decode("ascii")


class HttpMediaMerger(IMediaMerger):
    """POSTs audio + video to <base>/merge and returns the merged output URL."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        from tiktok_automation import config
        self.base_url = (base_url or config.MERGE_SERVICE_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else config.MERGE_API_KEY
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT

    def merge(self, audio: Artifact, video: Artifact, start_offset: int = 0) -> Artifact:
        body = {
            "audio_url": encode_artifact(audio),
            "video_url": encode_artifact(video),
            "start_offset": start_offset,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        response = http.send(
            "POST", f"{self.base_url}/merge", self.timeout, headers=headers, json_body=body
        )
        result = http.parse_json(response)
        if not isinstance(result, dict):
            raise CollaboratorError("Merge reply is not a JSON object")
        output_url = result.get("output_url")
        if not output_url:
            raise EmptyResultError("Merge service returned no output_url")
        return Artifact.by_reference(output_url, "video/mp4")
