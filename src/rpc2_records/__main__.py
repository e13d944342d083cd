"""Module entry point for `python -m rpc2_records`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
