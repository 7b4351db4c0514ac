import json
import logging
from typing import Dict, Protocol

from app.settings import Settings
from domain.errors import ConfigurationError, UpstreamFormatError, ValidationError
from domain.rubric_shape import AnswerShape, derive_answer_shape, validate_answers
from domain.schemas import GenerateRequest
from infra.llm.prompts import ASSESSOR_ROLE_PROMPT, GENERATION_PROMPT
from infra.rubric.loader import Rubric, load_rubric

logger = logging.getLogger(__name__)


class LLMClient(Protocol):
    async def generate(self, prompt: str, shape: AnswerShape) -> str: ...


def build_prompt(transcript: str, rubric: Rubric, shape: AnswerShape) -> str:
    fields = "\n".join(f"- {f.name}: {f.description}" for f in shape.fields)
    return GENERATION_PROMPT.format(
        role=ASSESSOR_ROLE_PROMPT,
        transcript=transcript,
        rubric=rubric.raw_text,
        guide=rubric.guide_content,
        count=len(shape.fields),
        fields=fields,
    )


def parse_answers(raw_text: str, shape: AnswerShape) -> Dict[str, str]:
    try:
        payload = json.loads(raw_text or "{}")
    except json.JSONDecodeError as exc:
        raise UpstreamFormatError("Model response was not valid JSON.") from exc
    return validate_answers(shape, payload)


class AnswerGenerator:
    """Turns a transcript into one evaluation text pair per rubric criterion."""

    def __init__(self, settings: Settings, llm: LLMClient):
        self.settings = settings
        self.llm = llm

    async def generate(self, body: GenerateRequest) -> Dict[str, str]:
        if not self.settings.GEMINI_API_KEY:
            raise ConfigurationError("Gemini API key not configured.")
        if not (body.student_name and body.transcript and body.gender):
            raise ValidationError("Missing studentName, transcript, or gender in request body.")

        rubric = load_rubric(self.settings.rubric_file)
        shape = derive_answer_shape(rubric.data)
        logger.info("Derived answer shape: %d criteria, %d fields",
                    shape.criteria, len(shape.fields))

        prompt = build_prompt(body.transcript, rubric, shape)
        logger.debug("Prompt (%d chars):\n%s", len(prompt), prompt)

        raw = await self.llm.generate(prompt, shape)
        logger.debug("Raw model response: %s", raw)

        answers = parse_answers(raw, shape)
        logger.info("Generated %d answer fields for %s", len(answers), body.student_name)
        return answers
