from typing import Dict
from fastapi import APIRouter, Depends
from api.dependencies import get_answer_generator
from domain.schemas import GenerateRequest
from domain.services.answer_generator import AnswerGenerator

router = APIRouter()


@router.post("/api/generate")
async def generate(body: GenerateRequest,
                   generator: AnswerGenerator = Depends(get_answer_generator)) -> Dict[str, str]:
    return await generator.generate(body)
