"""Shared requests helpers: one call, no retry, failures raised as CollaboratorError."""

from typing import Any, Dict, Optional

import requests

from tiktok_automation.domain.errors import CollaboratorError


def send(
    method: str,
    url: str,
    timeout: float,
    headers: Optional[Dict[str, str]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    params: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Perform one request; non-2xx, timeouts and connection errors raise CollaboratorError."""
    try:
        response = requests.request(
            method,
            url,
            headers=headers,
            json=json_body,
            params=params,
            timeout=timeout,
        )
    except requests.exceptions.Timeout as e:
        raise CollaboratorError(f"Request to {_host(url)} timed out after {timeout}s") from e
    except requests.exceptions.RequestException as e:
        raise CollaboratorError(f"Request to {_host(url)} failed: {e}") from e

    if response.status_code < 200 or response.status_code >= 300:
        error_text = response.text[:500] if response.text else ""
        raise CollaboratorError(
            f"API request failed with status {response.status_code}: {error_text}",
            status_code=response.status_code,
        )
    return response


def parse_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise CollaboratorError(f"Malformed JSON reply: {response.text[:200]}") from e


def download(url: str, timeout: float) -> bytes:
    """GET a by-reference artifact into memory."""
    return send("GET", url, timeout).content


def _host(url: str) -> str:
    # Keeps query strings (which may carry keys) out of log lines
    return url.split("?", 1)[0]
