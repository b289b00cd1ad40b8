"""
sdoc — dokumentacja HTML z bloków komentarzy API.

Użycie:
  sdoc <komenda> [opcje] PLIK...
  sdoc -api|-docco PLIK...        (zapis skrócony)

Komendy:
  api      Renderuje bloki /** ... */ (Markdown) do strony HTML ze spisem treści.
  docco    Dzieli źródło na sekcje dokumentacja/kod i wypisuje dokumentację.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby umlauty
# w dokumentacji i polskie znaki w pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from sdoc.commands import api as cmd_api
from sdoc.commands import docco as cmd_docco

__version__ = "0.1.0"

# pierwszy argument w starym stylu → nazwa komendy
_LEGACY_MODES = {
    "-api":   "api",
    "-docco": "docco",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdoc",
        description="sdoc — dokumentacja HTML z komentarzy API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"sdoc {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_api.add_parser(subparsers)
    cmd_docco.add_parser(subparsers)

    return parser


def normalize_argv(argv: list[str]) -> list[str]:
    if argv and argv[0] in _LEGACY_MODES:
        return [_LEGACY_MODES[argv[0]], *argv[1:]]
    return list(argv)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(normalize_argv(sys.argv[1:] if argv is None else argv))
    args.func(args)


if __name__ == "__main__":
    main()
