from __future__ import annotations

import sys


def _run(subcommand: str) -> None:
    from .cli import app

    argv0 = sys.argv[0]
    sys.argv = [argv0, subcommand, *sys.argv[1:]]
    app()


def clean_main() -> None:
    _run("clean")


def remove_emojis_main() -> None:
    _run("remove-emojis")
