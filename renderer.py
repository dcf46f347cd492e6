"""
Syntax highlighting for solution code
Wraps Pygments; one renderer instance is shared across requests
"""
import threading
import logging
from typing import Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from config import Settings
from errors import RenderError

logger = logging.getLogger(__name__)


class SolutionRenderer:
    """Renders code to inline-styled HTML markup"""

    def __init__(self, language: str, style: str):
        self.language = language
        self.style = style
        try:
            self._lexer = get_lexer_by_name(language)
            self._formatter = HtmlFormatter(style=style, noclasses=True, cssclass="solution-code")
        except ClassNotFound as e:
            raise RenderError(f"Highlighter setup failed: {e}") from e

    def render(self, code: str) -> str:
        try:
            return highlight(code, self._lexer, self._formatter)
        except Exception as e:
            logger.error(f"[RENDER_ERROR] {e}", exc_info=True)
            raise RenderError(f"Failed to render solution: {e}") from e


_renderer: Optional[SolutionRenderer] = None
_renderer_lock = threading.Lock()


def get_renderer(settings: Settings) -> SolutionRenderer:
    """Return the shared renderer, building it on first use or when the language/style changes"""
    global _renderer
    with _renderer_lock:
        current = _renderer
        if current is None or (current.language, current.style) != (settings.highlight_language, settings.highlight_style):
            logger.info(f"[RENDERER_INIT] language={settings.highlight_language}, style={settings.highlight_style}")
            current = SolutionRenderer(settings.highlight_language, settings.highlight_style)
            _renderer = current
        return current
