import logging, sys
from app.settings import Settings

def configure_logging(settings: Settings):
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    # httpx logs every request line at INFO; keep the Gemini call quiet unless debugging
    if settings.LOG_LEVEL.upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
