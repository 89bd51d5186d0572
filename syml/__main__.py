"""Module entrypoint for running syml as ``python -m syml``."""

from __future__ import annotations

from syml.cli import main


if __name__ == "__main__":
    main()
