import io
import logging
from pathlib import Path
from typing import Any, Dict

from docxtpl import DocxTemplate
from jinja2 import Environment, StrictUndefined, TemplateError, UndefinedError

from domain.errors import RenderError

logger = logging.getLogger(__name__)


def _jinja_env() -> Environment:
    # docxtpl tags: {{performance_observed_1}}, {{student_name}}, ...
    return Environment(undefined=StrictUndefined, autoescape=True)


def render_template(template_path: Path, context: Dict[str, Any]) -> bytes:
    """Render a .docx template, failing if any tag has no value in ``context``."""
    tpl = DocxTemplate(str(template_path))
    env = _jinja_env()

    missing = sorted(set(tpl.get_undeclared_template_variables(env)) - set(context))
    if missing:
        raise RenderError(
            f"Template references fields with no value: {', '.join(missing)}",
            details={"missing": missing})

    try:
        tpl.render(context, jinja_env=env, autoescape=True)
    except UndefinedError as exc:
        raise RenderError(f"Template references a field with no value: {exc.message}") from exc
    except TemplateError as exc:
        raise RenderError(f"Template could not be rendered: {exc}") from exc

    buf = io.BytesIO()
    tpl.save(buf)
    logger.debug("Rendered %s with %d fields", template_path, len(context))
    return buf.getvalue()
