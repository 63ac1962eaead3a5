"""Entry point for ``python -m cargo_nav``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
