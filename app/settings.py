import os
from pathlib import Path
from pydantic import BaseModel
from functools import lru_cache
from dotenv import load_dotenv
load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    return float(raw) if raw else None


class Settings(BaseModel):
    APP_NAME: str = os.getenv("APP_NAME", "Benchmark Answer Generator")
    ENV: str = os.getenv("ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    BASE_DIR: str = os.getenv("BASE_DIR", os.getcwd())
    GEMINI_API_KEY: str | None = os.getenv("GEMINI_API_KEY") or None
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-pro")
    GEMINI_API_BASE: str = os.getenv(
        "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
    GENERATION_TEMPERATURE: float = float(os.getenv("GENERATION_TEMPERATURE", "0.2"))
    LLM_TIMEOUT_S: float | None = _optional_float("LLM_TIMEOUT_S")
    RUBRIC_PATH: str = os.getenv("RUBRIC_PATH", "schema.json")
    TEMPLATE_PATH: str = os.getenv("TEMPLATE_PATH", "templates/blank_form.docx")
    OUTPUT_DIR: str = os.getenv("OUTPUT_DIR", "output")
    QUALIFICATION_CODE: str = os.getenv("QUALIFICATION_CODE", "CHC33021")

    def resolve(self, relative: str) -> Path:
        return Path(self.BASE_DIR) / relative

    @property
    def rubric_file(self) -> Path:
        return self.resolve(self.RUBRIC_PATH)

    @property
    def template_file(self) -> Path:
        return self.resolve(self.TEMPLATE_PATH)

    @property
    def output_dir(self) -> Path:
        return self.resolve(self.OUTPUT_DIR)


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
