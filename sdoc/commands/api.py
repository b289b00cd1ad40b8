"""Komenda: sdoc api — strona HTML z bloków komentarzy API."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from renderer import write_api_doc
from sdoc._config import load_settings, validate_toc_depth
from sdoc._files import read_sources

err_console = Console(stderr=True, soft_wrap=True)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    try:
        settings  = load_settings()
        toc_depth = validate_toc_depth(args.toc_depth) if args.toc_depth else settings.toc_depth
    except ValueError as e:
        err_console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    stylesheet = args.css or settings.stylesheet

    try:
        data = read_sources(args.files)
    except OSError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    try:
        if args.out:
            out_path = Path(args.out)
            with out_path.open("w", encoding=settings.output_encoding, errors="xmlcharrefreplace") as out:
                result = write_api_doc(data, out, stylesheet=stylesheet, toc_depth=toc_depth)
            err_console.print(
                f"[green]HTML:[/green] {escape(str(out_path))}  ({result.blocks} bloków, "
                f"{len(result.headers)} atrybutów nagłówków)"
            )
        else:
            result = write_api_doc(data, sys.stdout, stylesheet=stylesheet, toc_depth=toc_depth)
    except OSError as e:
        err_console.print(f"[red]Błąd zapisu dokumentacji:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if result.unterminated:
        err_console.print("[yellow]Ostrzeżenie: ostatni blok komentarza API nie został zamknięty.[/yellow]")


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "api",
        help="Generuje stronę HTML z bloków komentarzy API (/** ... */).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga bloki /** ... */ (Markdown) ze wszystkich plików, sklejonych
w kolejności argumentów, i renderuje je do HTML z nawigacją (spis treści).

Nagłówki:
  ### &nazwa_funkcji ###   → <h3 id="nazwa_funkcji">
  #### parameters ####     → <h4 class="parameters">

Przykłady:
  sdoc api src/*.c > api.html
  sdoc api lib.c --out doc/api.html --css style/apidoc.css
  sdoc -api lib.c util.c
        """,
    )
    p.add_argument(
        "files",
        nargs="+",
        metavar="PLIK",
        help="Pliki źródłowe (czytane i sklejane w podanej kolejności).",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        help="Zapisz HTML do pliku (domyślnie: stdout).",
    )
    p.add_argument(
        "--css",
        metavar="HREF",
        help="Odnośnik do arkusza stylów (domyślnie: SDOC_STYLESHEET lub apidoc.css).",
    )
    p.add_argument(
        "--toc-depth",
        metavar="N-M",
        help="Poziomy nagłówków w spisie treści (domyślnie: SDOC_TOC_DEPTH lub 1-6).",
    )
    p.set_defaults(func=run)
