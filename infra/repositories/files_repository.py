import logging
from app.settings import Settings
from domain.errors import StorageError

logger = logging.getLogger(__name__)


class OutputRepository:
    """Rendered documents under ``OUTPUT_DIR``; same filename overwrites."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def save(self, filename: str, content: bytes) -> str:
        out_dir = self.settings.output_dir
        path = out_dir / filename
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as out:
                out.write(content)
        except (OSError, ValueError) as exc:
            # ValueError: a path open() refuses outright, e.g. an embedded NUL
            logger.error("Could not write %s: %s", path, exc)
            reason = getattr(exc, "strerror", None) or exc
            raise StorageError(f"Could not save {filename}: {reason}") from exc
        logger.info("Saved %s (%d bytes)", path, len(content))
        return f"{self.settings.OUTPUT_DIR.rstrip('/')}/{filename}"
