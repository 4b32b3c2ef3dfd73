from pathlib import Path

from fastapi.templating import Jinja2Templates

from app.models import Size
from .config import settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["datastar_script_url"] = settings.datastar_script_url
templates.env.globals["sizes"] = list(Size)

# Line breaks other than "\n" that str.splitlines() honours. SSE data lines are
# rejoined with "\n" on the client, so these must not reach the stream raw.
_LINE_BREAK_REFS = str.maketrans(
    {ch: f"&#{ord(ch)};" for ch in "\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"}
)


def render_fragment(name: str, **context) -> str:
    """Render a template to a string, for patching into a live page.

    Stray line-break characters are written as character references so the
    markup survives being split into SSE data lines.
    """
    return templates.get_template(name).render(**context).translate(_LINE_BREAK_REFS)
