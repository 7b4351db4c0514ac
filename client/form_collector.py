"""Python counterpart of the browser form: validate, generate, fill, save."""
import base64
import binascii
import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class TranscriptForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_name: str = Field(..., min_length=2, alias="studentName")
    transcript: str = Field(..., min_length=50)
    gender: Literal["male", "female"]


class FormSubmissionError(Exception):
    """A stage of the flow failed; ``message`` is shown to the user as-is."""

    def __init__(self, message: str, stage: str, answers: Optional[Dict[str, Any]] = None):
        self.message = message
        self.stage = stage
        # generated answers, kept when only the fill-doc stage failed
        self.answers = answers
        super().__init__(message)


class DownloadedDocument(BaseModel):
    filename: str
    content: bytes
    answers: Dict[str, Any]

    def save(self, directory: Path) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.content)
        return path


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback


class FormCollector:
    def __init__(self, base_url: str = "http://localhost:8000",
                 client: Optional[httpx.Client] = None, timeout: Optional[float] = None):
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FormCollector":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _post(self, url: str, payload: Dict[str, Any], fallback: str, stage: str,
              answers: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self._client.post(url, json=payload)
        except httpx.RequestError as exc:
            raise FormSubmissionError(f"{fallback} ({exc})", stage, answers) from exc
        if response.is_error:
            raise FormSubmissionError(_error_message(response, fallback), stage, answers)
        return response.json()

    def submit(self, form: TranscriptForm) -> DownloadedDocument:
        answers = self._post("/api/generate", form.model_dump(by_alias=True),
                             "Failed to generate report.", "generate")
        logger.info("Report generated, creating DOCX")

        fill = self._post("/api/fill-doc", {"studentName": form.student_name, "answers": answers},
                          "Failed to fill DOCX.", "fill-doc", answers)
        if not isinstance(fill, dict) or not fill.get("ok") or not fill.get("base64Docx"):
            raise FormSubmissionError("Fill-doc response missing base64Docx.", "fill-doc", answers)

        try:
            content = base64.b64decode(fill["base64Docx"], validate=True)
        except (binascii.Error, ValueError) as exc:
            raise FormSubmissionError("Fill-doc response contained invalid base64.", "fill-doc",
                                      answers) from exc
        return DownloadedDocument(filename=fill.get("filename") or "output.docx",
                                  content=content, answers=answers)
