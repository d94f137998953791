"""Module entrypoint for `python -m growlscript`."""

from __future__ import annotations

from growlscript.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
