"""
renderer/page.py — strona HTML dokumentacji API.

Układ strony:
  nagłówek (DOCTYPE, charset utf-8, arkusz stylów)
  <div id="Doc">  treść wyrenderowana z bloków API
  <div id="Nav">  spis treści z tego samego tekstu

Publiczne API:
  build_page(body_html, toc_html, stylesheet) -> str
  render_api_doc(annotated, stylesheet, toc_depth) -> str
  write_api_doc(data, out, stylesheet, toc_depth) -> ExtractResult
"""

from __future__ import annotations

import html
from typing import TextIO

from comment_parser.extractor import CommentExtractor, ExtractResult
from renderer.markdown_html import DEFAULT_TOC_DEPTH, render_body, render_toc

DEFAULT_STYLESHEET = "apidoc.css"

_PAGE_HEAD = (
    "<!DOCTYPE html>\n"
    "<html><meta charset='utf-8'>\n"
    '<head><link href="{href}" rel="stylesheet" type="text/css">'
    "</head><body>"
)


def build_page(body_html: str, toc_html: str, stylesheet: str = DEFAULT_STYLESHEET) -> str:
    parts = [
        _PAGE_HEAD.format(href=html.escape(stylesheet, quote=True)),
        '<div id="Doc">\n', body_html, "</div>\n",
        '<div id="Nav">\n', toc_html, "</div>\n",
        "</body></html>\n",
    ]
    return "".join(parts)


def render_api_doc(
    annotated: bytes,
    stylesheet: str = DEFAULT_STYLESHEET,
    toc_depth: str | int = DEFAULT_TOC_DEPTH,
) -> str:
    """Renderuje tekst z adnotacjami (wynik ekstraktora) do pełnej strony HTML."""
    text = annotated.decode("utf-8", errors="replace")
    return build_page(
        render_body(text, toc_depth=toc_depth),
        render_toc(text, toc_depth=toc_depth),
        stylesheet=stylesheet,
    )


def write_api_doc(
    data: bytes,
    out: TextIO,
    stylesheet: str = DEFAULT_STYLESHEET,
    toc_depth: str | int = DEFAULT_TOC_DEPTH,
) -> ExtractResult:
    """
    Ekstrakcja bloków API z `data`, render i zapis strony do `out`.

    Błędy zapisu propagują jako OSError. Zwraca wynik ekstrakcji
    (liczba bloków, atrybuty nagłówków, czy został niezamknięty blok).
    """
    result = CommentExtractor().run(data)
    out.write(render_api_doc(result.text, stylesheet=stylesheet, toc_depth=toc_depth))
    out.flush()
    return result
