import logging
from typing import Any, Dict, Optional

import httpx

from app.settings import Settings
from domain.errors import ConfigurationError, UpstreamError, UpstreamFormatError
from domain.rubric_shape import AnswerShape

logger = logging.getLogger(__name__)


def to_response_schema(shape: AnswerShape) -> Dict[str, Any]:
    """Gemini ``responseSchema`` for an answer shape."""
    properties = {
        f.name: {"type": "STRING", "description": f.description}
        for f in shape.fields
    }
    return {"type": "OBJECT", "properties": properties, "required": shape.required}


def _extract_text(data: Dict[str, Any]) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError) as exc:
        reason = (data.get("promptFeedback") or {}).get("blockReason") if isinstance(data, dict) else None
        msg = "Gemini returned no candidates"
        if reason:
            msg += f" (blocked: {reason})"
        raise UpstreamFormatError(msg + ".") from exc
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))


class GeminiClient:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    @property
    def url(self) -> str:
        base = self.settings.GEMINI_API_BASE.rstrip("/")
        return f"{base}/models/{self.settings.GEMINI_MODEL}:generateContent"

    async def generate(self, prompt: str, shape: AnswerShape) -> str:
        """Send one structured-output request and return the raw response text."""
        if not self.settings.GEMINI_API_KEY:
            raise ConfigurationError("Gemini API key not configured.")

        headers = {"x-goog-api-key": self.settings.GEMINI_API_KEY}
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": to_response_schema(shape),
                "temperature": self.settings.GENERATION_TEMPERATURE,
            },
        }
        logger.info("Generating structured JSON response from %s", self.settings.GEMINI_MODEL)
        try:
            async with httpx.AsyncClient(timeout=self.settings.LLM_TIMEOUT_S,
                                         transport=self._transport) as client:
                response = await client.post(self.url, headers=headers, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("Gemini request failed with %s: %s", status, exc.response.text[:500])
            raise UpstreamError(f"Gemini request failed with status {status}.",
                                details={"status": status}) from exc
        except httpx.RequestError as exc:
            logger.error("Gemini request error: %s", exc)
            raise UpstreamError(f"Could not reach Gemini: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamFormatError("Gemini response body was not JSON.") from exc
        return _extract_text(data)
