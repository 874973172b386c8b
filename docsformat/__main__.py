"""Module entrypoint for running docsformat as ``python -m docsformat``."""

from __future__ import annotations

from docsformat.cli import main


if __name__ == "__main__":
    main()
