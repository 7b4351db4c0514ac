from fastapi import APIRouter, Depends
from app.settings import Settings, get_settings
from domain.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    rubric_found = settings.rubric_file.is_file()
    template_found = settings.template_file.is_file()
    api_key_configured = bool(settings.GEMINI_API_KEY)
    ready = rubric_found and template_found and api_key_configured
    return HealthResponse(
        status="ok" if ready else "degraded",
        api_key_configured=api_key_configured,
        rubric_found=rubric_found,
        template_found=template_found,
    )
