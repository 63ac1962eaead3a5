"""Create the main Typer CLI app."""

import typer

from ..api.config.get_package_version import get_package_version
from ..api.crate.cmd_open import cmd_open
from ..api.crate.Destination import Destination
from ..logging_config import setup_logging, teardown_logging
from ._handle_stage_result import _handle_stage_result


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cargo-nav {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        add_completion=False,
        help="Navigate directly to crate links from your terminal",
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.command()
    def open_link(
        crate_name: str = typer.Argument(..., help="Name of the crate to look up"),
        destination: str = typer.Argument(
            Destination.CRATE.value,
            help=f"Link to open: {Destination.choices()}",
            show_default=True,
        ),
        debug: bool = typer.Option(False, "--debug", "-d", help="Show request, response and failure detail"),
        print_only: bool = typer.Option(False, "--print", "-p", help="Print the link instead of opening it"),
        version: bool = typer.Option(  # noqa: ARG001
            False,
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ) -> None:
        """Open a crate's page, homepage, documentation or repository in the browser."""
        try:
            parsed = Destination.parse(destination)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="'DESTINATION'") from e

        setup_logging(debug)
        try:
            _handle_stage_result(cmd_open, print_only=print_only)(
                crate_name=crate_name,
                destination=parsed,
                dispatch=not print_only,
            )
        finally:
            teardown_logging()

    return app
