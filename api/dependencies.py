from fastapi import Depends

from app.settings import Settings, get_settings
from domain.services.answer_generator import AnswerGenerator, LLMClient
from domain.services.document_filler import DocumentFiller
from infra.llm.client import GeminiClient


def get_llm_client(settings: Settings = Depends(get_settings)) -> LLMClient:
    return GeminiClient(settings)


def get_answer_generator(settings: Settings = Depends(get_settings),
                         llm: LLMClient = Depends(get_llm_client)) -> AnswerGenerator:
    return AnswerGenerator(settings, llm)


def get_document_filler(settings: Settings = Depends(get_settings)) -> DocumentFiller:
    return DocumentFiller(settings)
