from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_name: Optional[str] = Field(default=None, alias="studentName")
    transcript: Optional[str] = None
    gender: Optional[str] = None


class FillDocRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_name: Optional[str] = Field(default=None, alias="studentName")
    answers: Optional[Dict[str, Any]] = None


class FillDocResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    filename: str
    saved_path: str = Field(alias="savedPath")
    base64_docx: str = Field(alias="base64Docx")


class HealthResponse(BaseModel):
    status: str
    api_key_configured: bool
    rubric_found: bool
    template_found: bool
