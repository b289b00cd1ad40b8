"""
renderer/markdown_html.py — Markdown → HTML (Python-Markdown).

Dwa tryby nad tym samym tekstem:
  render_body(text)  pełny HTML; twarde łamanie linii, id nagłówków
  render_toc(text)   tylko spis treści (zagnieżdżona lista nagłówków)

Atrybuty nagłówków ({#id}, {.klasa}) obsługuje rozszerzenie attr_list;
identyfikatory nadane w ten sposób trafiają też do odnośników spisu treści.
Klasa z nagłówka poziomu 4 to cały tekst nagłówka ({.Section Name}), więc
przed attr_list zamieniamy ją na listę klas ({.Section .Name}).
Podkreślenia wewnątrz identyfikatorów nie są traktowane jako emfaza.
"""

from __future__ import annotations

import re
from xml.etree import ElementTree as ET

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

DEFAULT_TOC_DEPTH = "1-6"

_EXTENSIONS = [
    "tables",        # tabele
    "fenced_code",   # bloki ``` i ~~~
    "attr_list",     # ### Nagłówek {#id} / {.klasa}
    "toc",           # id nagłówków + spis treści
]

_HEADING_TAGS = {f"h{i}" for i in range(1, 7)}

# " {.tekst z spacjami}" na końcu tekstu nagłówka
_CLASS_ATTR_RE = re.compile(r"[ ]+\{\.([^}\n]*\s[^}\n]*)\}[ ]*$")


def _class_list(match: re.Match[str]) -> str:
    words = match.group(1).split()
    return " {" + " ".join("." + w.lstrip(".") for w in words) + "}"


class HeaderClassTreeprocessor(Treeprocessor):
    """{.a b} w nagłówku → {.a .b}, zanim attr_list przeczyta atrybuty."""

    def run(self, root: ET.Element) -> None:
        for el in root.iter():
            if el.tag not in _HEADING_TAGS:
                continue
            if len(el):
                last = el[-1]
                if last.tail:
                    last.tail = _CLASS_ATTR_RE.sub(_class_list, last.tail)
            elif el.text:
                el.text = _CLASS_ATTR_RE.sub(_class_list, el.text)


class HeaderClassExtension(Extension):
    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # attr_list ma priorytet 8; wyższy priorytet = wcześniej
        md.treeprocessors.register(HeaderClassTreeprocessor(md), "sdoc_header_class", 9)


def _new_markdown(*, hard_wrap: bool, toc_depth: str | int) -> markdown.Markdown:
    extensions: list[str | Extension] = [*_EXTENSIONS, HeaderClassExtension()]
    if hard_wrap:
        extensions.append("nl2br")
    return markdown.Markdown(
        extensions=extensions,
        extension_configs={"toc": {"toc_depth": toc_depth}},
        output_format="html",
    )


def render_body(text: str, toc_depth: str | int = DEFAULT_TOC_DEPTH) -> str:
    return _new_markdown(hard_wrap=True, toc_depth=toc_depth).convert(text)


def render_toc(text: str, toc_depth: str | int = DEFAULT_TOC_DEPTH) -> str:
    md = _new_markdown(hard_wrap=False, toc_depth=toc_depth)
    md.convert(text)
    return md.toc  # type: ignore[attr-defined]
