"""Drop the subcommand name cargo passes to external subcommands."""

import os


def _strip_cargo_subcommand(argv: list[str]) -> list[str]:
    """Remove the leading ``nav`` from ``cargo-nav nav <args>``.

    ``cargo nav serde`` runs ``cargo-nav nav serde`` with ``CARGO`` set in the
    environment. Without ``CARGO``, ``nav`` is an ordinary crate name.
    """
    if argv and argv[0] == "nav" and os.environ.get("CARGO"):
        return argv[1:]
    return argv
