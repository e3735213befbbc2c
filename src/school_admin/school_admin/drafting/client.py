from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from ..core.constants import DEFAULT_DRAFT_TIMEOUT_SECONDS, DEFAULT_GEMINI_MODEL
from ..core.exceptions import DraftingError

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class TextDrafter(Protocol):
    def generate(self, prompt: str) -> str:
        """Return generated text or raise DraftingError."""

        raise NotImplementedError


class GeminiTextDrafter(TextDrafter):
    """Calls the Gemini ``generateContent`` REST endpoint."""

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = GEMINI_BASE_URL,
        timeout: float = DEFAULT_DRAFT_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        self._api_key = (api_key or "").strip()
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    def generate(self, prompt: str) -> str:
        if not self._api_key:
            raise DraftingError("No API key configured for text generation")

        url = f"{self._base_url}/models/{self._model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self._api_key}

        try:
            if self._client is not None:
                r = self._client.post(url, json=payload, headers=headers, timeout=self._timeout)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    r = client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise DraftingError(f"Text generation request failed: {e}") from e

        if r.status_code >= 400:
            raise DraftingError(f"Text generation returned HTTP {r.status_code}")

        try:
            data = r.json()
        except ValueError as e:
            raise DraftingError("Text generation returned invalid JSON") from e

        text = _extract_text(data)
        if not text:
            raise DraftingError("Text generation returned no text")
        return text


def _extract_text(data) -> str:
    # {"candidates":[{"content":{"parts":[{"text": "..."}]}}]}
    if not isinstance(data, dict):
        raise DraftingError("Text generation reply is not a JSON object")
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list):
        raise DraftingError("Text generation reply has malformed candidates")
    if not candidates:
        return ""
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        raise DraftingError("Text generation reply has no content parts")
    texts = [p.get("text") for p in parts if isinstance(p, dict)]
    return "".join(t for t in texts if isinstance(t, str)).strip()
