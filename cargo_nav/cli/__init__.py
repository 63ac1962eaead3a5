"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from ._create_app import _create_app
    from ._strip_cargo_subcommand import _strip_cargo_subcommand

    if argv is None:
        argv = sys.argv[1:]
    argv = _strip_cargo_subcommand(argv)

    app = _create_app()
    try:
        # typer renders usage errors itself and exits through SystemExit
        app(argv, prog_name="cargo-nav", standalone_mode=True)
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
