from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from docx import Document
from fastapi.testclient import TestClient

from api.dependencies import get_llm_client
from app.main import app
from app.settings import Settings, get_settings
from domain.rubric_shape import AnswerShape

TRANSCRIPT = (
    "Assessor: Amira would like to join the art group. How would you approach this? "
    "Student: I would first ask Amira what matters to her, whether she prefers a women-only "
    "session, and let her know she is welcome to wear her hijab. I'd check if she wants an "
    "Arabic interpreter and we would agree on the next steps together."
)


def build_rubric(criteria: int, extra_keys: Optional[Dict[str, str]] = None) -> dict:
    instructions: Dict[str, str] = {str(i): f"Benchmark criterion {i}" for i in range(1, criteria + 1)}
    instructions.update(extra_keys or {})
    return {
        "rolePlayScenerio": {
            "scenario": "Supporting a client to join a community art group.",
            "instruction for roleplay": instructions,
        },
        "assessmentGuideContent": "Performance to Observe: (student name) asked the client about ...",
    }


def tags_for(criteria: int) -> List[str]:
    tags = ["student_name"]
    for i in range(1, criteria + 1):
        tags += [f"performance_observed_{i}", f"example_action_{i}"]
    return tags


def write_template(path: Path, tags: List[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    doc = Document()
    doc.add_heading("Role-play Observation", level=1)
    for tag in tags:
        doc.add_paragraph("{{" + tag + "}}")
    doc.save(str(path))
    return path


def docx_text(content: bytes) -> str:
    doc = Document(io.BytesIO(content))
    return "\n".join(p.text for p in doc.paragraphs)


def answers_for(criteria: int) -> Dict[str, str]:
    answers: Dict[str, str] = {}
    for i in range(1, criteria + 1):
        answers[f"performance_observed_{i}"] = f"(student name) met criterion {i}."
        answers[f"example_action_{i}"] = f"(Student Name) stated, \"quote {i}\"."
    return answers


class FakeLLM:
    def __init__(self, response: str):
        self.response = response
        self.calls: List[tuple] = []

    async def generate(self, prompt: str, shape: AnswerShape) -> str:
        self.calls.append((prompt, shape))
        return self.response


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    (tmp_path / "schema.json").write_text(json.dumps(build_rubric(2)), encoding="utf-8")
    write_template(tmp_path / "templates" / "blank_form.docx", tags_for(2))
    return tmp_path


@pytest.fixture
def settings(workspace: Path) -> Settings:
    return Settings(GEMINI_API_KEY="test-key", BASE_DIR=str(workspace))


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM(json.dumps(answers_for(2)))


@pytest.fixture
def client(settings: Settings, fake_llm: FakeLLM):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
