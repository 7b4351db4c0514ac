from fastapi import APIRouter
from api.endpoints.form import router as form_router
from api.endpoints.generate import router as generate_router
from api.endpoints.fill_doc import router as fill_doc_router
from api.endpoints.health import router as health_router

api_router = APIRouter()
api_router.include_router(form_router, tags=["form"])
api_router.include_router(generate_router, tags=["generate"])
api_router.include_router(fill_doc_router, tags=["fill-doc"])
api_router.include_router(health_router, tags=["health"])
