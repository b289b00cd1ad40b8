"""Komenda: sdoc docco — podział źródła na sekcje dokumentacja/kod."""

from __future__ import annotations

import argparse
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from comment_parser import format_report, split_sections
from data_model.sections import SectionList
from sdoc._files import read_sources

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def _show_table(sections: SectionList) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NR",   justify="right", no_wrap=True, style="dim")
    table.add_column("DOC",  justify="right", no_wrap=True)
    table.add_column("KOD",  justify="right", no_wrap=True)
    table.add_column("DOKUMENTACJA", no_wrap=False, max_width=60, style="bold cyan")

    for n, section in enumerate(sections):
        table.add_row(
            str(n),
            str(section.doc_lines()),
            str(section.code_lines()),
            _first_line(section.doc_text())[:80] or "-",
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(sections)} sekcji[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    try:
        data = read_sources(args.files)
    except OSError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    sections = split_sections(data)
    sys.stdout.flush()
    sys.stdout.buffer.write(format_report(sections))
    sys.stdout.buffer.flush()

    if args.show:
        _show_table(sections)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "docco",
        help="Dzieli źródło na sekcje (dokumentacja, kod) i wypisuje dokumentację.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Linie zaczynające się (po wcięciu) od '*' lub '%*' to dokumentacja,
pozostałe to kod. Wypisuje liczbę sekcji i dokumentację każdej z nich.

Przykłady:
  sdoc docco program.sas
  sdoc docco lib.c --show
  sdoc -docco lib.c
        """,
    )
    p.add_argument(
        "files",
        nargs="+",
        metavar="PLIK",
        help="Pliki źródłowe (czytane i sklejane w podanej kolejności).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl dodatkowo tabelę sekcji.",
    )
    p.set_defaults(func=run)
