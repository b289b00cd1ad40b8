"""
renderer — HTML z tekstu Markdown wyciągniętego z bloków API.

Publiczne API:
  render_body(text, toc_depth)          → HTML treści
  render_toc(text, toc_depth)           → HTML spisu treści
  build_page(body, toc, stylesheet)     → pełna strona
  render_api_doc(annotated, ...)        → strona z tekstu ekstraktora
  write_api_doc(data, out, ...)         → ExtractResult (zapis do strumienia)
"""

from .markdown_html import DEFAULT_TOC_DEPTH, render_body, render_toc
from .page          import DEFAULT_STYLESHEET, build_page, render_api_doc, write_api_doc

__all__ = [
    "DEFAULT_TOC_DEPTH",
    "DEFAULT_STYLESHEET",
    "render_body",
    "render_toc",
    "build_page",
    "render_api_doc",
    "write_api_doc",
]
