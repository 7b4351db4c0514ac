"""Derive the expected answer shape from a rubric.

Each numbered benchmark criterion under
``rolePlayScenerio["instruction for roleplay"]`` yields two required text
fields: ``performance_observed_<i>`` and ``example_action_<i>``.
"""
import logging
import math
from typing import Any, Dict, List, Literal, Mapping

from pydantic import BaseModel

from domain.errors import SchemaError, UpstreamFormatError

logger = logging.getLogger(__name__)

SCENARIO_KEY = "rolePlayScenerio"
INSTRUCTIONS_KEY = "instruction for roleplay"


class AnswerField(BaseModel):
    name: str
    criterion: int
    kind: Literal["performance", "evidence"]
    description: str


class AnswerShape(BaseModel):
    criteria: int
    fields: List[AnswerField]

    @property
    def required(self) -> List[str]:
        return [f.name for f in self.fields]


def _is_numeric_key(key: str) -> bool:
    try:
        return math.isfinite(float(key))
    except (TypeError, ValueError):
        return False


def criterion_keys(rubric: Mapping[str, Any]) -> List[str]:
    scenario = rubric.get(SCENARIO_KEY) if isinstance(rubric, Mapping) else None
    instructions = scenario.get(INSTRUCTIONS_KEY) if isinstance(scenario, Mapping) else None
    if not isinstance(instructions, Mapping):
        logger.warning("'%s' not found in rubric", INSTRUCTIONS_KEY)
        return []
    keys = [k for k in instructions if _is_numeric_key(k)]
    return sorted(keys, key=float)


def derive_answer_shape(rubric: Mapping[str, Any]) -> AnswerShape:
    keys = criterion_keys(rubric)
    if not keys:
        raise SchemaError("Could not generate a dynamic schema.",
                          details={"reason": "no numbered benchmark criteria"})

    expected = [str(i) for i in range(1, len(keys) + 1)]
    if [k.strip() for k in keys] != expected:
        logger.warning("Criterion keys %s are not contiguous from 1; numbering answers 1..%d",
                       keys, len(keys))

    fields: List[AnswerField] = []
    for i in range(1, len(keys) + 1):
        fields.append(AnswerField(
            name=f"performance_observed_{i}",
            criterion=i,
            kind="performance",
            description=f"Evaluate student's performance for benchmark criterion {i} based on the transcript.",
        ))
        fields.append(AnswerField(
            name=f"example_action_{i}",
            criterion=i,
            kind="evidence",
            description=f"Provide a direct quote from the transcript as evidence for criterion {i}.",
        ))
    return AnswerShape(criteria=len(keys), fields=fields)


def validate_answers(shape: AnswerShape, payload: Any) -> Dict[str, str]:
    """Check a decoded model response against the shape; extra keys are dropped."""
    if not isinstance(payload, dict):
        raise UpstreamFormatError("Model response was not a JSON object.")
    missing = [name for name in shape.required if name not in payload]
    if missing:
        raise UpstreamFormatError(
            f"Model response is missing required fields: {', '.join(missing)}",
            details={"missing": missing})
    not_text = [name for name in shape.required if not isinstance(payload[name], str)]
    if not_text:
        raise UpstreamFormatError(
            f"Model response fields must be strings: {', '.join(not_text)}",
            details={"invalid": not_text})
    return {name: payload[name] for name in shape.required}
