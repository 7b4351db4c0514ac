import base64
import logging
import re
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from app.settings import Settings
from domain.errors import NotFoundError, ValidationError
from infra.docx.renderer import render_template
from infra.repositories.files_repository import OutputRepository

logger = logging.getLogger(__name__)

STUDENT_NAME_KEY = "student_name"
DEFAULT_FILENAME_STEM = "Student"

_PLACEHOLDER = re.compile(r"\(student name\)", re.IGNORECASE)
_ILLEGAL = re.compile(r'[\\/:*?"<>|\s\x00-\x1f\x7f]+')
MAX_FILENAME_STEM = 100


def inject_student_name(answers: Mapping[str, Any], student_name: str) -> Dict[str, Any]:
    """Swap the ``(student name)`` placeholder for the real name in every string value."""
    out: Dict[str, Any] = {}
    for key, value in (answers or {}).items():
        if isinstance(value, str):
            out[key] = _PLACEHOLDER.sub(lambda _m: student_name, value)
        else:
            out[key] = value
    out[STUDENT_NAME_KEY] = student_name
    return out


def sanitize_filename(name: Optional[str]) -> str:
    stem = _ILLEGAL.sub("_", (name or "").strip()).strip("_")
    stem = stem[:MAX_FILENAME_STEM].rstrip("_")
    return stem or DEFAULT_FILENAME_STEM


def output_filename(student_name: str, qualification_code: str) -> str:
    return f"{sanitize_filename(student_name)}_{qualification_code}.docx"


class FilledDocument(BaseModel):
    filename: str
    saved_path: str
    content: bytes

    def as_base64(self) -> str:
        return base64.b64encode(self.content).decode("ascii")


class DocumentFiller:
    def __init__(self, settings: Settings, repo: Optional[OutputRepository] = None):
        self.settings = settings
        self.repo = repo or OutputRepository(settings)

    def fill(self, student_name: Optional[str], answers: Any) -> FilledDocument:
        if not student_name or not isinstance(answers, Mapping):
            raise ValidationError("studentName and answers are required.")

        template = self.settings.template_file
        if not template.is_file():
            raise NotFoundError(f"{self.settings.TEMPLATE_PATH} not found.")

        context = inject_student_name(answers, student_name)
        content = render_template(template, context)

        filename = output_filename(student_name, self.settings.QUALIFICATION_CODE)
        saved_path = self.repo.save(filename, content)
        return FilledDocument(filename=filename, saved_path=saved_path, content=content)
