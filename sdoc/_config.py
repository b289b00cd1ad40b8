"""Konfiguracja sdoc — zmienne środowiskowe, opcjonalnie z pliku .env."""

from __future__ import annotations

import codecs
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from renderer import DEFAULT_STYLESHEET, DEFAULT_TOC_DEPTH

# "N" albo "N-M", poziomy nagłówków 1..6
_TOC_DEPTH_RE = re.compile(r"^[1-6](-[1-6])?$")


@dataclass(frozen=True, slots=True)
class Settings:
    stylesheet:      str = DEFAULT_STYLESHEET
    toc_depth:       str = DEFAULT_TOC_DEPTH
    output_encoding: str = "utf-8"


def validate_toc_depth(value: str) -> str:
    value = value.strip()
    if not _TOC_DEPTH_RE.match(value):
        raise ValueError(f"Nieprawidłowa głębokość spisu treści: '{value}' (oczekiwano N lub N-M, 1..6)")
    if "-" in value:
        low, high = (int(v) for v in value.split("-"))
        if low > high:
            raise ValueError(f"Nieprawidłowy zakres spisu treści: '{value}'")
    return value


def validate_encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError as e:
        raise ValueError(f"Nieznane kodowanie wyjścia: '{value}'") from e
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Czyta ustawienia ze zmiennych środowiskowych:
      SDOC_STYLESHEET       href arkusza stylów (domyślnie apidoc.css)
      SDOC_TOC_DEPTH        poziomy nagłówków w spisie treści (domyślnie 1-6)
      SDOC_OUTPUT_ENCODING  kodowanie pliku --out (domyślnie utf-8)

    Bez `environ` najpierw ładuje .env z katalogu bieżącego (nie nadpisuje
    zmiennych już ustawionych) i używa os.environ.
    """
    if environ is None:
        load_dotenv(Path.cwd() / ".env", override=False)
        environ = os.environ

    return Settings(
        stylesheet      = environ.get("SDOC_STYLESHEET", DEFAULT_STYLESHEET),
        toc_depth       = validate_toc_depth(environ.get("SDOC_TOC_DEPTH", DEFAULT_TOC_DEPTH)),
        output_encoding = validate_encoding(environ.get("SDOC_OUTPUT_ENCODING", "utf-8")),
    )
