from fastapi import FastAPI
from app.settings import settings
from app.logging import configure_logging
from app.error_handlers import attach_error_handlers
from api.router import api_router

configure_logging(settings)
app = FastAPI(title=settings.APP_NAME)

attach_error_handlers(app)
app.include_router(api_router)
