"""
authormap command-line interface.

Usage::

    authormap attribute llama-3-8b --catalog ./catalog
    authormap models --provider groq
    authormap authors
    authormap authors list --json
    authormap authors models meta
"""

from __future__ import annotations

import logging

import click

from authormap import __version__
from authormap.logging_config import configure_logging


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="authormap")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """authormap: find out who developed the models your providers serve."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# Register command modules
# ---------------------------------------------------------------------------

from authormap.commands import attribution, authors  # noqa: E402

for _mod in [attribution, authors]:
    _mod.register(main)


if __name__ == "__main__":
    main()
