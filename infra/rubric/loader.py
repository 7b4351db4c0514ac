import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel

from domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Rubric(BaseModel):
    raw_text: str
    data: Dict[str, Any]

    @property
    def guide_content(self) -> str:
        content = self.data.get("assessmentGuideContent", "")
        if isinstance(content, str):
            return content
        return json.dumps(content, ensure_ascii=False, indent=2)


def load_rubric(path: Path) -> Rubric:
    """Read the rubric fresh from disk; nothing is cached between requests."""
    name = path.name
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Rubric not found or unreadable at %s: %s", path, exc)
        raise ConfigurationError(f"{name} could not be read.") from exc
    if not raw_text.strip():
        raise ConfigurationError(f"{name} could not be read.")

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        logger.error("Error parsing %s: %s", path, exc)
        raise ConfigurationError(f"{name} is not valid JSON.") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{name} does not contain a JSON object.")
    return Rubric(raw_text=raw_text, data=data)
